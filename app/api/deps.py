from typing import Optional
from fastapi import Depends, Header, Request
from pydantic import BaseModel

from app.core.config import Settings
from app.core.exceptions import AuthorizationError, ValidationError
from app.domain.identity.models import Role, normalize_address
from app.domain.identity.service import IdentityService
from app.domain.records.service import MedicalRecordService
from app.domain.appointments.service import AppointmentService
from app.domain.permissions.service import PermissionService
from app.infrastructure.ledger import LedgerStore
from app.infrastructure.transport import LedgerTransport


class SessionContext(BaseModel):
    """Caller identity as asserted by the front-end session"""
    address: str
    role: Role

    def owns(self, address: str) -> bool:
        return normalize_address(self.address) == normalize_address(address)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_ledger(request: Request) -> LedgerStore:
    return request.app.state.ledger


def get_transport(request: Request) -> LedgerTransport:
    return request.app.state.transport


def get_identity_service(
    settings: Settings = Depends(get_settings),
    store: LedgerStore = Depends(get_ledger),
    transport: LedgerTransport = Depends(get_transport),
) -> IdentityService:
    return IdentityService(
        store,
        transport,
        allow_shadow_identities=settings.ALLOW_SHADOW_IDENTITIES,
        admin_addresses=settings.ADMIN_WALLET_ADDRESSES,
    )


def get_record_service(
    store: LedgerStore = Depends(get_ledger),
    transport: LedgerTransport = Depends(get_transport),
) -> MedicalRecordService:
    return MedicalRecordService(store, transport)


def get_appointment_service(
    store: LedgerStore = Depends(get_ledger),
    transport: LedgerTransport = Depends(get_transport),
) -> AppointmentService:
    return AppointmentService(store, transport)


def get_permission_service(
    store: LedgerStore = Depends(get_ledger),
    transport: LedgerTransport = Depends(get_transport),
) -> PermissionService:
    return PermissionService(store, transport)


def get_session(
    x_wallet_address: Optional[str] = Header(None),
    x_user_role: Optional[str] = Header(None),
) -> SessionContext:
    if not x_wallet_address:
        raise ValidationError(
            "X-Wallet-Address header is required",
            details={"header": "X-Wallet-Address"}
        )
    try:
        role = Role((x_user_role or "").lower())
    except ValueError:
        raise ValidationError(
            "X-User-Role header must be one of: patient, doctor, admin",
            details={"header": "X-User-Role", "value": x_user_role}
        )
    return SessionContext(address=x_wallet_address, role=role)


def get_patient_session(session: SessionContext = Depends(get_session)) -> SessionContext:
    if session.role != Role.PATIENT:
        raise AuthorizationError(
            "Only patients may perform this action",
            details={"role": session.role.value}
        )
    return session
