"""
Limpeza de payloads antes da gravação de documentos.

O banco de documentos rejeita campos indefinidos; formulários parciais
produzem muitos None e strings vazias.
"""

from typing import Any


def clean_empty_values(obj: Any) -> Any:
    """
    Cópia recursiva sem valores vazios.

    - dict: remove chaves cujo valor (já limpo) é None ou ""
    - list/tuple: limpa cada elemento e remove os None
    - date/datetime e escalares: inalterados

    Examples:
        >>> clean_empty_values({"a": 1, "b": None, "c": "", "d": {"e": None}})
        {'a': 1, 'd': {}}
        >>> clean_empty_values([1, None, {"x": ""}])
        [1, {}]
    """
    if isinstance(obj, (list, tuple)):
        cleaned = (clean_empty_values(v) for v in obj)
        return [v for v in cleaned if v is not None]

    if isinstance(obj, dict):
        result = {}
        for key, value in obj.items():
            cleaned_value = clean_empty_values(value)
            if cleaned_value is not None and cleaned_value != "":
                result[key] = cleaned_value
        return result

    return obj
