"""CLI для проверки и нормализации адресов."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, TextIO

from jid.config import OUTPUT_FORMATS, PROJECTIONS, get_settings, validate_projections
from jid.modules.address import Address, parse
from jid.modules.errors import AddressError

LOGGER = logging.getLogger("jid.main")


def project(address: Address, name: str) -> str:
    if name == "bare":
        return str(address.bare())
    if name == "local":
        return str(address.local_only())
    return str(address.domain_only())


def render(raw: str, address: Address, output_format: str, projections: Sequence[str]) -> str:
    """Формирует строку вывода для одного адреса."""
    if output_format == "json":
        payload: Dict[str, Any] = {
            "input": raw,
            "address": str(address),
            "local": address.local,
            "domain": address.domain,
            "resource": address.resource,
            "projections": {name: project(address, name) for name in projections},
        }
        return json.dumps(payload, ensure_ascii=False)

    line = f"{raw} -> {address}"
    if projections:
        extras = " ".join(f"{name}={project(address, name)}" for name in projections)
        line = f"{line} [{extras}]"
    return line


def iter_inputs(values: Sequence[str], stream: TextIO) -> Iterator[str]:
    if values:
        yield from values
        return
    for line in stream:
        candidate = line.rstrip("\r\n")
        if candidate.strip():
            yield candidate


def check_addresses(
    values: Iterable[str],
    *,
    output_format: str,
    projections: Sequence[str],
    fail_fast: bool,
    out: TextIO,
) -> int:
    """Печатает нормализованные адреса и возвращает число отклонённых."""
    failures = 0
    for raw in values:
        try:
            address = parse(raw)
        except AddressError as exc:
            failures += 1
            LOGGER.warning("Адрес %r отклонён: %s", raw, exc)
            if fail_fast:
                break
            continue
        print(render(raw, address, output_format, projections), file=out)
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    """Проверяет адреса из аргументов или stdin (по одному на строку)."""
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Проверка и нормализация адресов local@domain/resource")
    parser.add_argument(
        "addresses",
        nargs="*",
        help="Адреса для проверки; без аргументов читаются из stdin",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=settings.output_format,
        help="Формат вывода: text или json (по строке на адрес)",
    )
    parser.add_argument(
        "--projection",
        action="append",
        choices=PROJECTIONS,
        help="Проекция для вывода (можно указать несколько раз)",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        default=settings.fail_fast,
        help="Остановиться на первом некорректном адресе",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s :: %(message)s",
    )

    projections = validate_projections(args.projection) if args.projection else settings.projections
    failures = check_addresses(
        iter_inputs(args.addresses, sys.stdin),
        output_format=args.format,
        projections=projections,
        fail_fast=args.fail_fast,
        out=sys.stdout,
    )
    if failures:
        LOGGER.info("Готово: отклонено адресов %s", failures)
        return 1
    LOGGER.info("Готово: все адреса корректны")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
