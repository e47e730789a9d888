from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Trip Autosort Service"
    LOG_LEVEL: str = "DEBUG"
    ENVIRONMENT: str = "development"
    API_PREFIX: str = "/api"

    class Config:
        env_file = ".env"

configs = Settings()
