"""Исключения разбора и нормализации адресов."""

from __future__ import annotations

from typing import Optional

from jid.modules.constants import MAX_PART_BYTES, PART_DOMAIN, PART_LOCAL, PART_RESOURCE


class AddressError(ValueError):
    """Базовое исключение: адрес не может быть разобран или собран."""

    reason = "invalid address format"

    def __init__(self, part: Optional[str] = None, reason: Optional[str] = None) -> None:
        self.part = part
        if reason is not None:
            self.reason = reason
        message = f"invalid {part} part: {self.reason}" if part else self.reason
        super().__init__(message)


class AddressIsEmpty(AddressError):
    """Передана пустая строка."""

    reason = "address is empty"

    def __init__(self) -> None:
        super().__init__(None)


class MissingLocalPart(AddressError):
    """Адрес начинается с '@'."""

    reason = "missing local part"

    def __init__(self) -> None:
        super().__init__(PART_LOCAL)


class MissingDomainPart(AddressError):
    """Домен отсутствует или пуст."""

    reason = "missing domain part"

    def __init__(self) -> None:
        super().__init__(PART_DOMAIN)


class MissingResourcePart(AddressError):
    """После '/' ничего нет."""

    reason = "missing resource part"

    def __init__(self) -> None:
        super().__init__(PART_RESOURCE)


class PartInvalidUTF8(AddressError):
    reason = "part contains invalid UTF-8"


class PartLenIsTooLong(AddressError):
    reason = f"too long, max {MAX_PART_BYTES} bytes"


class NotAllowedCharacters(AddressError):
    reason = "not allowed characters"

    def __init__(self, part: str = PART_LOCAL) -> None:
        super().__init__(part)


class IDNAConversionError(AddressError):
    """Домен не удалось привести к отображаемой IDN-форме."""

    reason = "IDNA conversion failed"

    def __init__(self, reason: Optional[str] = None) -> None:
        super().__init__(PART_DOMAIN, reason)
