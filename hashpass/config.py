from dataclasses import dataclass

from PyQt5 import QtCore

from hashpass.generator import DEFAULT_LENGTH
from hashpass.hashing import Algorithm
from hashpass.report import ReportKind

ORGANIZATION = "HashPassTools"
APPLICATION = "HashPasswordAnalyzer"


@dataclass
class AnalyzerSettings:
    """Last-used generator and analyzer preferences."""

    report: ReportKind = ReportKind.PERFORMANCE
    iterations: int = 1000
    length: int = DEFAULT_LENGTH
    algorithm: Algorithm = Algorithm.UNIVERSAL
    uppercase: bool = True
    lowercase: bool = True
    numbers: bool = True
    symbols: bool = False


def open_settings(path: str | None = None) -> QtCore.QSettings:
    """Return the per-user settings store, or an INI file at ``path``."""
    if path is not None:
        return QtCore.QSettings(path, QtCore.QSettings.IniFormat)
    return QtCore.QSettings(ORGANIZATION, APPLICATION)


def load_settings(settings: QtCore.QSettings) -> AnalyzerSettings:
    defaults = AnalyzerSettings()

    report = settings.value("report", defaults.report.value, type=str)
    algorithm = settings.value("algorithm", defaults.algorithm.value, type=str)

    try:
        report_kind = ReportKind(report)
    except ValueError:
        report_kind = defaults.report
    try:
        algorithm_kind = Algorithm.parse(algorithm)
    except ValueError:
        algorithm_kind = defaults.algorithm

    return AnalyzerSettings(
        report=report_kind,
        iterations=settings.value("iterations", defaults.iterations, type=int),
        length=settings.value("length", defaults.length, type=int),
        algorithm=algorithm_kind,
        uppercase=settings.value("uppercase", defaults.uppercase, type=bool),
        lowercase=settings.value("lowercase", defaults.lowercase, type=bool),
        numbers=settings.value("numbers", defaults.numbers, type=bool),
        symbols=settings.value("symbols", defaults.symbols, type=bool),
    )


def save_settings(settings: QtCore.QSettings, values: AnalyzerSettings) -> None:
    settings.setValue("report", values.report.value)
    settings.setValue("iterations", values.iterations)
    settings.setValue("length", values.length)
    settings.setValue("algorithm", values.algorithm.value)

    settings.setValue("uppercase", values.uppercase)
    settings.setValue("lowercase", values.lowercase)
    settings.setValue("numbers", values.numbers)
    settings.setValue("symbols", values.symbols)
    settings.sync()
