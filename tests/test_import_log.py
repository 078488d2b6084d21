"""Tests for the import log."""

import logging
from datetime import datetime

import pytest

from maquitrack.domain.import_log import ImportLog


def _clock():
    times = iter([datetime(2024, 1, 15, 8, 0, 1), datetime(2024, 1, 15, 8, 0, 2)])
    return lambda: next(times)


def test_entries_are_ordered_and_formatted():
    log = ImportLog(clock=_clock())
    log.info("Procesando hoja 'BD MAQUINARIA'")
    log.error("Fila 4: Equipo no encontrado")

    assert [entry.level for entry in log.entries] == ["info", "error"]
    assert log.lines() == [
        "[08:00:01] Procesando hoja 'BD MAQUINARIA'",
        "[08:00:02] Fila 4: Equipo no encontrado",
    ]
    assert len(log) == 2


def test_listeners_see_entries_as_they_are_appended():
    log = ImportLog()
    seen = []
    log.subscribe(lambda entry: seen.append(entry.message))

    log.info("uno")
    assert seen == ["uno"]
    log.warning("dos")
    assert seen == ["uno", "dos"]


def test_entries_are_forwarded_to_logging(caplog):
    log = ImportLog()
    with caplog.at_level(logging.INFO, logger="maquitrack.domain.import_log"):
        log.warning("SOAT de EXC-001 vence pronto")

    assert ("maquitrack.domain.import_log", logging.WARNING, "SOAT de EXC-001 vence pronto") in caplog.record_tuples


def test_unknown_level_rejected():
    with pytest.raises(ValueError):
        ImportLog().append("debug", "x")
