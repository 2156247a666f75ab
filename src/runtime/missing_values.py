"""Missing-Value Normalizer — подстановка missingValueReplacement.

PMML 4.4, MiningSchema / MISSING-VALUE-TREATMENT-METHOD:
"If this attribute is specified then a missing input value is automatically
replaced by the given value. That is, the model itself works as if the given
value was found in the original input."

Нормализация выполняется строго до выбора executor: executor видит запрос,
в котором подставленное поле неотличимо от переданного клиентом.
"""

import logging

from src.core.domain.context import PMMLContext
from src.core.domain.model import PMMLModel

logger = logging.getLogger(__name__)


class MissingValueNormalizer:
    """Подстановка значений по умолчанию для отсутствующих input fields.

    Stateless. Мутирует только context (запрос и audit trail), модель не
    изменяет. Идемпотентна: повторный вызов ничего не добавляет.
    """

    def normalize(self, model: PMMLModel, context: PMMLContext) -> tuple[str, ...]:
        """Добавление отсутствующих полей из missing_value_replacement_map.

        Поле считается присутствующим, если параметр с таким именем есть в
        запросе (в том числе со значением None).

        Args:
            model: модель с картой missingValueReplacement
            context: контекст текущей оценки (мутируется на месте)

        Returns:
            Имена полей, подставленных этим вызовом (в порядке карты)
        """
        logger.debug("normalize %s %s", model.name, context)
        request_data = context.request_data
        injected: list[str] = []
        for field_name, replacement in model.missing_value_replacement_map.items():
            if request_data.has_param(field_name):
                continue
            logger.debug("missingValueReplacement %s %r", field_name, replacement)
            request_data.add_request_param(field_name, replacement)
            context.add_missing_value_replaced(field_name, replacement)
            injected.append(field_name)
        return tuple(injected)
