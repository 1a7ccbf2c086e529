"""Нормализация частей адреса: local, domain, resource."""

from __future__ import annotations

import ipaddress
from typing import Union

import idna

from jid.modules.constants import (
    FORBIDDEN_LOCAL_CHARS,
    MAX_PART_BYTES,
    PART_DOMAIN,
    PART_LOCAL,
    PART_RESOURCE,
)
from jid.modules.errors import (
    IDNAConversionError,
    NotAllowedCharacters,
    PartInvalidUTF8,
    PartLenIsTooLong,
)


def as_text(value: Union[str, bytes]) -> str:
    """Приводит вход к str; невалидные байты сохраняются как суррогаты."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", "surrogateescape")
    return value


def byte_length(value: str) -> int:
    """Длина части в байтах UTF-8; байты из surrogateescape считаются по одному."""
    try:
        return len(value.encode("utf-8", "surrogateescape"))
    except UnicodeEncodeError:
        return len(value.encode("utf-8", "surrogatepass"))


def is_valid_utf8(value: str) -> bool:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def normalize_local(local: str) -> str:
    """Проверяет local-часть; значение не меняется."""
    if byte_length(local) > MAX_PART_BYTES:
        raise PartLenIsTooLong(PART_LOCAL)

    if not is_valid_utf8(local):
        raise PartInvalidUTF8(PART_LOCAL)

    if any(char in FORBIDDEN_LOCAL_CHARS for char in local):
        raise NotAllowedCharacters(PART_LOCAL)

    return local


def is_ipv6_literal(value: str) -> bool:
    """IPv6 без зоны и не IPv4-mapped (такие адреса считаются IPv4)."""
    try:
        address = ipaddress.IPv6Address(value)
    except ValueError:
        return False
    return address.ipv4_mapped is None and not address.scope_id


def is_ipv4_literal(value: str) -> bool:
    """Dotted-quad IPv4 или IPv4-mapped IPv6 без скобок (::ffff:a.b.c.d)."""
    try:
        address = ipaddress.ip_address(value)
    except ValueError:
        return False
    if isinstance(address, ipaddress.IPv4Address):
        return True
    return address.ipv4_mapped is not None and not address.scope_id


def normalize_domain(domain: str) -> str:
    """Возвращает домен в отображаемой IDN-форме (Unicode, нижний регистр, NFC).

    IP-литералы (`[IPv6]` в скобках и IPv4) возвращаются без изменений.
    Punycode обратно не кодируется.
    """
    if not is_valid_utf8(domain):
        raise PartInvalidUTF8(PART_DOMAIN)

    if domain.startswith("[") and domain.endswith("]") and is_ipv6_literal(domain[1:-1]):
        return domain

    if is_ipv4_literal(domain):
        return domain

    if domain.endswith("."):
        domain = domain[:-1]

    try:
        display = idna.decode(domain, uts46=True, std3_rules=True)
    except idna.IDNAError as exc:
        raise IDNAConversionError(str(exc)) from exc

    # Вторая точка в конце дала бы строку, которая при повторном разборе меняется.
    if not display or display.endswith("."):
        raise IDNAConversionError("Empty label")

    if byte_length(display) > MAX_PART_BYTES:
        raise PartLenIsTooLong(PART_DOMAIN)

    return display


def normalize_resource(resource: str) -> str:
    """Проверяет resource-часть; ограничений на символы нет."""
    if byte_length(resource) > MAX_PART_BYTES:
        raise PartLenIsTooLong(PART_RESOURCE)

    if not is_valid_utf8(resource):
        raise PartInvalidUTF8(PART_RESOURCE)

    return resource
