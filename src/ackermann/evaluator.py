"""Ackermann Evaluator — точка входа для вычисления A(m, n) по контракту

Цепочка обработки:
1. JSON payload → проверка по ackermann_request.json (jsonschema)
2. payload → AckermannRequest (pydantic, strict)
3. A(m, n) с лимитами ресурсов (HyperOpLimits)
4. Опционально: сверка с эталонной рекурсией (ackermann_reference)
5. AckermannResult → JSON → проверка по ackermann_result.json

Ошибки не перехватываются для восстановления: вычисление детерминировано,
повтор ничего не меняет. HyperOpResourceExhausted логируется и пробрасывается.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from src.ackermann.contracts import validate_ackermann_request, validate_ackermann_result
from src.ackermann.domain.evaluation import AckermannRequest, AckermannResult
from src.ackermann.math.ackermann_peter import A
from src.ackermann.math.hyperoperation import (
    DEFAULT_LIMITS,
    HyperOpLimits,
    HyperOpResourceExhausted,
)
from src.ackermann.math.naturals import describe_natural
from src.ackermann.math.reference import REFERENCE_MAX_STEPS_DEFAULT, ackermann_reference

logger = logging.getLogger(__name__)


class ReferenceMismatch(RuntimeError):
    """Результат через гипероператоры разошёлся с эталонной рекурсией."""
    pass


@dataclass(frozen=True)
class AckermannEvaluatorConfig:
    """Конфигурация AckermannEvaluator."""

    limits: HyperOpLimits = DEFAULT_LIMITS

    # Сверка с ackermann_reference (только для малых аргументов)
    cross_check: bool = False
    reference_max_steps: int = REFERENCE_MAX_STEPS_DEFAULT


class AckermannEvaluator:
    """Вычисление A(m, n) по контракту запроса/результата.

    Stateless: конфигурация задаётся один раз, evaluate() можно вызывать
    сколько угодно раз.
    """

    def __init__(self, config: Optional[AckermannEvaluatorConfig] = None):
        self.config = config or AckermannEvaluatorConfig()

    def evaluate(self, request: AckermannRequest) -> AckermannResult:
        """Вычисление A(m, n) для валидированного запроса.

        Args:
            request: запрос с натуральными m, n

        Returns:
            AckermannResult с точным значением

        Raises:
            HyperOpResourceExhausted: превышены лимиты ресурсов
            ReferenceMismatch: cross_check включён и значения разошлись
        """
        m_desc = describe_natural(request.m)
        n_desc = describe_natural(request.n)
        logger.debug("Evaluating A(%s, %s)", m_desc, n_desc)

        try:
            value = A(request.m, request.n, self.config.limits)
        except HyperOpResourceExhausted as e:
            logger.warning("A(%s, %s) exhausted resources: %s", m_desc, n_desc, e)
            raise

        if self.config.cross_check:
            expected = ackermann_reference(
                request.m, request.n, max_steps=self.config.reference_max_steps
            )
            if expected != value:
                raise ReferenceMismatch(
                    f"A({m_desc}, {n_desc}): hyperoperation result differs "
                    f"from reference recursion"
                )

        result = AckermannResult.from_value(request.m, request.n, value)
        logger.debug("A(%s, %s) evaluated: %d bits", m_desc, n_desc, result.bit_length)
        return result

    def evaluate_payload(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Вычисление по JSON payload с проверкой обоих контрактов.

        Args:
            payload: dict по схеме ackermann_request.json

        Returns:
            dict по схеме ackermann_result.json

        Raises:
            ContractViolation: payload или результат не соответствуют контракту
            pydantic.ValidationError: payload не проходит strict-валидацию модели
        """
        validate_ackermann_request(payload)
        request = AckermannRequest.model_validate(payload)

        result = self.evaluate(request).model_dump(mode="json")
        validate_ackermann_result(result)
        return result
