from schemas.common import CamelModel


class DashboardSummary(CamelModel):
    total_students: int
    total_classes: int
    average_attendance: int      # 전체 출결 중 present 비율 (정수 %)
    average_gpa: str             # 4.0 환산 평균, 소수 1자리 문자열
