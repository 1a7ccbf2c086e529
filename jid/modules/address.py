"""Адрес local@domain/resource: разбор, сборка из частей и проекции."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from jid.modules.constants import LOCAL_SEPARATOR, RESOURCE_SEPARATOR
from jid.modules.decompose import decompose
from jid.modules.errors import AddressError, MissingDomainPart
from jid.modules.utils.normalize import (
    as_text,
    normalize_domain,
    normalize_local,
    normalize_resource,
)

LOGGER = logging.getLogger("jid.address")

RawPart = Union[str, bytes, None]


@dataclass(frozen=True)
class Address:
    """Неизменяемый адрес из трёх частей.

    Отсутствующая часть хранится как None. Экземпляры создаются через
    `parse` или `build`; прямой вызов конструктора части не проверяет.
    """

    local: Optional[str] = None
    domain: Optional[str] = None
    resource: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("local", "domain", "resource"):
            if getattr(self, name) == "":
                object.__setattr__(self, name, None)

    @classmethod
    def parse(cls, raw: Union[str, bytes]) -> "Address":
        return parse(raw)

    @classmethod
    def build(cls, local: RawPart = None, domain: RawPart = None, resource: RawPart = None) -> "Address":
        return build(local=local, domain=domain, resource=resource)

    def __str__(self) -> str:
        chunks = []
        if self.local:
            chunks.append(self.local)
            if self.domain:
                chunks.append(LOCAL_SEPARATOR)
        if self.domain:
            chunks.append(self.domain)
        if self.resource:
            chunks.append(RESOURCE_SEPARATOR)
            chunks.append(self.resource)
        return "".join(chunks)

    def to_string(self) -> str:
        """Каноническая строка адреса."""
        return str(self)

    @property
    def is_bare(self) -> bool:
        return self.resource is None

    def bare(self) -> "Address":
        """Адрес без resource."""
        return Address(local=self.local, domain=self.domain)

    def local_only(self) -> "Address":
        return Address(local=self.local)

    def domain_only(self) -> "Address":
        return Address(domain=self.domain)

    def with_resource(self, resource: Union[str, bytes]) -> "Address":
        """Привязывает к голому адресу новый resource (с проверкой)."""
        return build(local=self.local, domain=self.domain, resource=resource)


def build(local: RawPart = None, domain: RawPart = None, resource: RawPart = None) -> Address:
    """Собирает адрес из явно переданных частей.

    Домен обязателен. Пустые local и resource считаются отсутствующими
    и не проверяются.
    """
    if not domain:
        raise MissingDomainPart()

    try:
        normalized_local = normalize_local(as_text(local)) if local else None
        normalized_domain = normalize_domain(as_text(domain))
        normalized_resource = normalize_resource(as_text(resource)) if resource else None
    except AddressError as exc:
        LOGGER.debug("Не удалось собрать адрес из частей: %s", exc)
        raise

    return Address(local=normalized_local, domain=normalized_domain, resource=normalized_resource)


def parse(raw: Union[str, bytes]) -> Address:
    """Разбирает строку вида local@domain/resource в Address."""
    text = as_text(raw)
    try:
        local, domain, resource = decompose(text)
    except AddressError as exc:
        LOGGER.debug("Адрес %r отклонён при разборе: %s", text, exc)
        raise
    return build(local=local, domain=domain, resource=resource)


def is_valid(raw: Union[str, bytes]) -> bool:
    """Проверяет, что строка разбирается в корректный адрес."""
    try:
        parse(raw)
    except AddressError:
        return False
    return True
