from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str
    project_name: str = "Dining Commons API"
    api_prefix: str = "/api"

    # Supabase authentication configuration
    # SUPABASE_URL: Full Supabase project URL (e.g., https://xxx.supabase.co)
    #   Used to derive JWKS URL and issuer for JWT verification
    supabase_url: str

    # SUPABASE_JWT_AUDIENCE: JWT audience claim to validate (default: "authenticated")
    supabase_jwt_audience: str = "authenticated"

    # ADMIN_EMAILS: comma-separated list of emails that get the admin role
    admin_emails: str = ""

    log_level: str = "INFO"

    # Echo SQL when set
    debug: bool = Field(default=False, alias="DEBUG")

    @property
    def supabase_jwks_url(self) -> str:
        """Derive JWKS URL from Supabase URL."""
        return f"{self.supabase_url.rstrip('/')}/auth/v1/.well-known/jwks.json"

    @property
    def supabase_issuer(self) -> str:
        """Derive issuer from Supabase URL."""
        return f"{self.supabase_url.rstrip('/')}/auth/v1"

    @property
    def admin_email_list(self) -> list[str]:
        """Admin emails, lowercased, blanks dropped."""
        return [e.strip().lower() for e in self.admin_emails.split(",") if e.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="forbid"
    )


settings = Settings()
