from typing import Annotated, Dict, List, Union, Optional
import json
from pydantic import AnyHttpUrl, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

class Settings(BaseSettings):
    PROJECT_NAME: str = "EHR Ledger"
    API_STR: str = "/api"
    LOG_LEVEL: str = "INFO"

    # CORS
    BACKEND_CORS_ORIGINS: Annotated[List[AnyHttpUrl], NoDecode] = []

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, str):
            return json.loads(v)
        elif isinstance(v, list):
            return v
        raise ValueError(v)

    # Ledger
    LEDGER_LATENCY_SECONDS: float = 0.0
    LEDGER_OPERATION_LATENCY: Dict[str, float] = {}
    LEDGER_SEED_FIXTURES: bool = True
    LEDGER_SNAPSHOT_PATH: Optional[str] = None

    @field_validator("LEDGER_LATENCY_SECONDS")
    @classmethod
    def check_latency(cls, v: float) -> float:
        if v < 0:
            raise ValueError("LEDGER_LATENCY_SECONDS must not be negative")
        return v

    # Identity
    ALLOW_SHADOW_IDENTITIES: bool = False
    ADMIN_WALLET_ADDRESSES: Annotated[List[str], NoDecode] = ["0x9876543210fedcba9876543210fedcba98765432"]

    @field_validator("ADMIN_WALLET_ADDRESSES", mode="before")
    @classmethod
    def assemble_admin_addresses(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str) and not v.startswith("["):
            v = [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, str):
            v = json.loads(v)
        if isinstance(v, list):
            return [address.lower() for address in v]
        raise ValueError(v)

    model_config = SettingsConfigDict(case_sensitive=True, env_file=".env", extra='ignore')

settings = Settings()
