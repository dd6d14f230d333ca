from typing import Literal

from pydantic_settings import BaseSettings
from pydantic import Field

class Settings(BaseSettings):
    app_name: str = "Product Catalog API"
    app_env: str = Field("dev", alias="APP_ENV")
    secret_key: str = Field(default=None, alias="SECRET_KEY")
    access_token_expire_minutes: int = Field(60 * 24, alias="ACCESS_TOKEN_EXPIRE_MINUTES")
    database_url: str = Field(default=None, alias="DATABASE_URL")

    log_level: str = Field("info", alias="LOG_LEVEL")
    log_format: Literal["console", "json"] = Field("console", alias="LOG_FORMAT")

    # "all" lists every product on GET /products, "owner" only the caller's
    product_list_scope: Literal["all", "owner"] = Field("all", alias="PRODUCT_LIST_SCOPE")
    # when False, list/create collapse service failures to 400
    forward_error_status: bool = Field(False, alias="FORWARD_ERROR_STATUS")

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
