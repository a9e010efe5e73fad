import logging

from sqlalchemy import create_engine, event          # SQLAlchemy 엔진 생성 도구
from sqlalchemy.orm import declarative_base          # 모델의 Base 클래스
from sqlalchemy.orm import sessionmaker              # 세션 팩토리 함수
from sqlalchemy.pool import StaticPool

from config.settings import settings                 # ✅ 환경변수 설정 파일 불러오기

logger = logging.getLogger(__name__)


def _engine_kwargs(url: str) -> dict:
    # SQLite는 요청 스레드가 달라도 같은 커넥션을 쓰도록 허용
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}
    kwargs = {"connect_args": {"check_same_thread": False}}
    # 메모리 DB는 커넥션이 끊기면 사라지므로 하나의 커넥션을 공유
    if url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return kwargs


# ✅ 환경변수에서 DB 연결 URL을 불러와 엔진 생성 (프로세스당 1개)
engine = create_engine(settings.DATABASE_URL, **_engine_kwargs(settings.DATABASE_URL))

if settings.DATABASE_URL.startswith("sqlite"):
    # - 외래키 제약을 기본으로 끄고 있어 연결마다 켬
    # - pysqlite 자체 트랜잭션 처리를 끄고 BEGIN을 직접 보내야 SAVEPOINT(begin_nested)가 정상 동작
    @event.listens_for(engine, "connect")
    def _on_sqlite_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_sqlite_begin(conn):
        conn.exec_driver_sql("BEGIN")

# ✅ 세션 팩토리: DB 연결에 사용할 세션 생성기 정의
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ✅ 모델 정의 시 상속할 Base 클래스 (Declarative 방식 사용)
Base = declarative_base()


# ==========================================================
# [공통] DB 세션 관리
# - 모든 요청에서 DB 연결을 생성하고 종료
# ==========================================================
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """모든 모델을 import 한 뒤 테이블 생성 (이미 있으면 건너뜀)"""
    from models import students, classes, assignments, grades, attendance  # noqa: F401  모델 등록용

    Base.metadata.create_all(bind=engine)
    logger.info(f"Database ready: {engine.url.render_as_string(hide_password=True)}")


def reset_db():
    """테스트 셋업 전용: 전체 테이블 삭제 후 재생성"""
    from models import students, classes, assignments, grades, attendance  # noqa: F401

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
