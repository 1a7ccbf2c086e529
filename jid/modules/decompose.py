"""Разбиение строки адреса на local, domain и resource."""

from __future__ import annotations

from typing import Tuple

from jid.modules.constants import LOCAL_SEPARATOR, RESOURCE_SEPARATOR
from jid.modules.errors import (
    AddressIsEmpty,
    MissingDomainPart,
    MissingLocalPart,
    MissingResourcePart,
)


def decompose(raw: str) -> Tuple[str, str, str]:
    """Возвращает кандидатов (local, domain, resource); отсутствующая часть — пустая строка.

    Разделители ищутся с конца строки: сначала последний '/', затем
    последний '@' в оставшейся части. Сами части здесь не проверяются.
    """
    if not raw:
        raise AddressIsEmpty()

    resource = ""
    sep = raw.rfind(RESOURCE_SEPARATOR)
    if sep > -1:
        if sep == len(raw) - 1:
            raise MissingResourcePart()
        resource = raw[sep + 1 :]
        raw = raw[:sep]

    sep = raw.rfind(LOCAL_SEPARATOR)
    if sep == -1:
        return "", raw, resource
    if sep == len(raw) - 1:
        raise MissingDomainPart()
    if sep == 0:
        raise MissingLocalPart()
    return raw[:sep], raw[sep + 1 :], resource
