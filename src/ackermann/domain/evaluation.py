"""
Evaluation — модели запроса и результата вычисления A(m, n)

Immutable Pydantic модели, полностью совместимые с JSON Schema
(contracts/schema/ackermann_request.json, contracts/schema/ackermann_result.json).

Результат хранится в шестнадцатеричном виде (value_hex): десятичное
преобразование огромных int ограничено sys.get_int_max_str_digits(),
а hex() и int(s, 16) работают за линейное время без ограничений.
"""

from pydantic import BaseModel, Field

SCHEMA_VERSION = "1"


# =============================================================================
# REQUEST
# =============================================================================


class AckermannRequest(BaseModel):
    """
    Запрос на вычисление A(m, n).

    strict=True: bool, float и строки не приводятся к int.
    """

    m: int = Field(..., ge=0, strict=True, description="Первый аргумент (порядок)")
    n: int = Field(..., ge=0, strict=True, description="Второй аргумент")

    model_config = {"frozen": True}


# =============================================================================
# RESULT
# =============================================================================


class AckermannResult(BaseModel):
    """
    Результат вычисления A(m, n).

    Immutable модель (frozen=True). Содержит:
    - Версию схемы
    - Аргументы (m, n)
    - Значение в hex (value_hex) и его размер (bit_length)
    """

    schema_version: str = Field(
        SCHEMA_VERSION, pattern="^1$", description="Версия схемы для tracking совместимости"
    )
    m: int = Field(..., ge=0, strict=True, description="Первый аргумент")
    n: int = Field(..., ge=0, strict=True, description="Второй аргумент")
    value_hex: str = Field(
        ...,
        pattern="^0x(0|[1-9a-f][0-9a-f]*)$",
        description="A(m, n) в шестнадцатеричном виде",
    )
    bit_length: int = Field(..., ge=0, description="Количество бит в A(m, n)")

    model_config = {"frozen": True}

    @property
    def value(self) -> int:
        """A(m, n) как int."""
        return int(self.value_hex, 16)

    @classmethod
    def from_value(cls, m: int, n: int, value: int) -> "AckermannResult":
        """Сборка результата из вычисленного значения."""
        return cls(m=m, n=n, value_hex=hex(value), bit_length=value.bit_length())
