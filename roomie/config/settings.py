from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List


class Settings(BaseSettings):
    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_service_role_key: Optional[str] = None  # Required for auth admin lookups (existing account by email)

    # Supabase Edge Functions (email delivery lives there)
    invitation_function: str = "send-roommate-invitation"
    announcement_function: str = "send-announcement-email"

    # Household
    bill_grace_days: int = 1
    recent_bills_limit: int = 3
    balance_payer_inclusive: bool = False  # opt-in corrected split, see household.balances
    roommate_colors: str = "bg-blue-500,bg-green-500,bg-purple-500,bg-red-500,bg-yellow-500,bg-pink-500"

    # App
    app_name: str = "roomie-backend"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000,http://127.0.0.1:5173"
    rate_limit: str = "100/minute"  # slowapi format, e.g. "100/minute"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    def get_roommate_colors_list(self) -> List[str]:
        return [c.strip() for c in self.roommate_colors.split(",") if c.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix needed
        extra="ignore"
    )


settings = Settings()
