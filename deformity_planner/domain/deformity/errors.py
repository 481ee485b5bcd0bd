"""
변형 분석 입력 오류
검증 실패는 계산 전에 발생하며, 해당 호출은 결과 없이 종료된다.
"""


class DeformityInputError(ValueError):
    """입력 검증 실패 공통 부모"""

    code = "invalid_input"

    def __init__(self, message: str, fields: tuple[str, ...] = ()):
        super().__init__(message)
        self.message = message
        self.fields = fields


class InvalidInput(DeformityInputError):
    """MPTA/LDFA/JLCA 중 하나 이상이 없거나 유한한 숫자가 아님"""

    code = "invalid_input"


class NegativeJLCA(DeformityInputError):
    """JLCA < 0 (이 모델에서는 물리적으로 불가)"""

    code = "negative_jlca"

    def __init__(self, jlca: float):
        super().__init__(
            f"JLCA cannot be negative in this calculation (got {jlca}).",
            fields=("jlca",),
        )
        self.jlca = jlca
