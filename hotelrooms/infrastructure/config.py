from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Hotel Rooms"
    database_url: str = "sqlite+aiosqlite:///./hotel_rooms.db"
    echo_sql: bool = False
    log_level: str = "INFO"


settings = Settings()
