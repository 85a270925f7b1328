"""Daily Plan 오류 정의

입력 오류는 ValueError 계열로 올리고, HTTP 상태 코드 매핑은 API 계층에서 한다.
"""


class ExerciseNotFoundError(ValueError):
    """카탈로그에 없는 운동 ID"""

    def __init__(self, exercise_id: str):
        self.exercise_id = exercise_id
        super().__init__(f"운동을 찾을 수 없습니다: {exercise_id}")


class DuplicateExerciseError(ValueError):
    """이미 카탈로그에 있는 운동 ID"""

    def __init__(self, exercise_id: str):
        self.exercise_id = exercise_id
        super().__init__(f"이미 존재하는 운동 ID입니다: {exercise_id}")


class InvalidWeightError(ValueError):
    """카탈로그 기본 무게로 쓸 수 없는 값 (음수)"""

    def __init__(self, exercise_id: str, weight: float):
        self.exercise_id = exercise_id
        self.weight = weight
        super().__init__(f"기본 무게는 0 이상이어야 합니다: {exercise_id}={weight}")
