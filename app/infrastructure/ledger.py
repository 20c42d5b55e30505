"""
In-memory ledger store

Holds every collection the services read and write, the per-type id
counters, and the write lock that serialises mutations. One store is built
per application and injected into the services; nothing here is a module
level singleton.
"""

from typing import Callable, Dict, List, Optional, AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from pydantic import BaseModel, Field
import asyncio
import logging

from app.domain.identity.models import DirectoryEntry, Doctor, Patient, normalize_address
from app.domain.records.models import MedicalRecord
from app.domain.appointments.models import Appointment
from app.domain.permissions.models import PermissionLogEntry

logger = logging.getLogger(__name__)

ID_KINDS = ("patient", "doctor", "record", "appointment")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LedgerState(BaseModel):
    """Every collection of the ledger; serialisable as one JSON document"""
    patients: List[Patient] = Field(default_factory=list)
    doctors: List[Doctor] = Field(default_factory=list)
    medical_records: List[MedicalRecord] = Field(default_factory=list)
    appointments: List[Appointment] = Field(default_factory=list)
    # patient_id -> doctor_id -> granted
    permissions: Dict[str, Dict[str, bool]] = Field(default_factory=dict)
    # newest first
    permission_logs: List[PermissionLogEntry] = Field(default_factory=list)
    registered_users: Dict[str, DirectoryEntry] = Field(default_factory=dict)
    next_id: Dict[str, int] = Field(default_factory=lambda: {kind: 1 for kind in ID_KINDS})


class LedgerStore:
    """Shared state container with serialised writes"""

    def __init__(
        self,
        state: Optional[LedgerState] = None,
        clock: Callable[[], datetime] = utcnow
    ):
        self.state = state or LedgerState()
        self.clock = clock
        self._lock = asyncio.Lock()

    @classmethod
    def seeded(cls, clock: Callable[[], datetime] = utcnow) -> "LedgerStore":
        """Store preloaded with the demo patients, doctors and records"""
        from app.infrastructure.fixtures import build_fixture_state

        return cls(build_fixture_state(clock()), clock=clock)

    @classmethod
    def from_snapshot(cls, path: str, clock: Callable[[], datetime] = utcnow) -> "LedgerStore":
        state = LedgerState.model_validate_json(Path(path).read_text(encoding="utf-8"))
        logger.info(f"Loaded ledger snapshot from {path}")
        return cls(state, clock=clock)

    def save_snapshot(self, path: str) -> None:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        # target is only ever replaced whole
        partial = target.with_name(target.name + ".tmp")
        partial.write_text(self.state.model_dump_json(indent=2), encoding="utf-8")
        partial.replace(target)
        logger.info(f"Saved ledger snapshot to {path}")

    def now(self) -> datetime:
        return self.clock()

    @property
    def locked(self) -> bool:
        return self._lock.locked()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[LedgerState]:
        """Apply a mutation atomically.

        Writers are serialised on one lock. The body must not await; if it
        raises, the state is restored to what it was on entry so callers
        never observe a partial write.
        """
        async with self._lock:
            backup = self.state.model_copy(deep=True)
            try:
                yield self.state
            except BaseException:
                self.state = backup
                raise

    def allocate_id(self, kind: str) -> str:
        """Next id for ``kind``; only call inside a transaction"""
        counters = self.state.next_id
        value = counters.get(kind, 1)
        counters[kind] = value + 1
        return str(value)

    # Lookups. Address matching is case-insensitive and returns the first
    # principal in registration order.

    def find_patient_by_address(self, address: str) -> Optional[Patient]:
        key = normalize_address(address)
        return next(
            (p for p in self.state.patients if p.wallet_address.lower() == key), None
        )

    def find_doctor_by_address(self, address: str) -> Optional[Doctor]:
        key = normalize_address(address)
        return next(
            (d for d in self.state.doctors if d.wallet_address.lower() == key), None
        )

    def find_patient(self, patient_id: str) -> Optional[Patient]:
        return next((p for p in self.state.patients if p.id == patient_id), None)

    def find_doctor(self, doctor_id: str) -> Optional[Doctor]:
        return next((d for d in self.state.doctors if d.id == doctor_id), None)
