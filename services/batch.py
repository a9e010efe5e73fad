"""
services/batch.py

여러 건의 독립적인 쓰기 작업 실행기
- 한 건이 실패해도 나머지는 계속 시도
- 실패 건은 (항목, 메시지)로 모아서 호출자에게 돌려줌 (재시도 없음)
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Tuple

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    succeeded: List[Any] = field(default_factory=list)
    failed: List[Tuple[Any, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def run_batch(items: Iterable, write: Callable[[Any], Any], isolate: Callable = None) -> BatchResult:
    """
    items 각각에 write(item) 호출
    - isolate: 한 건을 감싸는 컨텍스트 팩토리 (예: session.begin_nested)
      → 실패한 건만 롤백
    """
    result = BatchResult()
    for item in items:
        try:
            if isolate is None:
                written = write(item)
            else:
                with isolate():
                    written = write(item)
        except Exception as exc:
            logger.warning(f"Batch write failed for {item!r}: {exc}")
            result.failed.append((item, str(exc)))
            continue
        result.succeeded.append(written)
    if result.failed:
        logger.warning(f"Batch finished with {len(result.failed)} failure(s), {len(result.succeeded)} success(es)")
    return result
