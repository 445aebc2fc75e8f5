from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class AttendanceEntry:
    """Dados enviados pelo formulário: data do culto + contagens, ainda sem id."""

    service_date: date
    homens: int = 0
    homens_visitantes: int = 0
    mulheres: int = 0
    mulheres_visitantes: int = 0
    kids: int = 0
    baby: int = 0

    @property
    def total(self) -> int:
        return (
            self.homens
            + self.homens_visitantes
            + self.mulheres
            + self.mulheres_visitantes
            + self.kids
            + self.baby
        )


@dataclass(frozen=True)
class AttendanceRecord:
    """Entidade de domínio: frequência de um culto.

    ``record_id`` is assigned by the store on creation and never changes, so
    edits and deletes do not depend on the record's position.
    """

    record_id: str
    service_date: date
    homens: int = 0
    homens_visitantes: int = 0
    mulheres: int = 0
    mulheres_visitantes: int = 0
    kids: int = 0
    baby: int = 0

    @classmethod
    def from_entry(cls, record_id: str, entry: AttendanceEntry) -> "AttendanceRecord":
        return cls(
            record_id=record_id,
            service_date=entry.service_date,
            homens=entry.homens,
            homens_visitantes=entry.homens_visitantes,
            mulheres=entry.mulheres,
            mulheres_visitantes=entry.mulheres_visitantes,
            kids=entry.kids,
            baby=entry.baby,
        )

    def to_entry(self) -> AttendanceEntry:
        return AttendanceEntry(
            service_date=self.service_date,
            homens=self.homens,
            homens_visitantes=self.homens_visitantes,
            mulheres=self.mulheres,
            mulheres_visitantes=self.mulheres_visitantes,
            kids=self.kids,
            baby=self.baby,
        )

    @property
    def total(self) -> int:
        return self.membros + self.visitantes + self.criancas

    @property
    def membros(self) -> int:
        return self.homens + self.mulheres

    @property
    def visitantes(self) -> int:
        return self.homens_visitantes + self.mulheres_visitantes

    @property
    def criancas(self) -> int:
        return self.kids + self.baby
