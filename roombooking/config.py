from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings as _BaseSettings
from pydantic_settings import SettingsConfigDict
from sqlalchemy import URL


class BaseSettings(_BaseSettings):  # Создаем свой BaseSettings
    model_config = SettingsConfigDict(
        extra="ignore",  # Игнорируем лишние поля
        env_file=".env",  # Обозначаем файл где содержаться переменные окружения
        env_file_encoding="utf-8",
    )


class PostgresConfig(BaseSettings, env_prefix="POSTGRES_"):
    """Конфиг для базы данных postgres"""

    host: str = Field(
        default="localhost",
        description="Айпи где расположена база данных",
        examples=["123.52.13.16"],
    )
    port: int = Field(
        default=5432, description="Порт по которому работает база данных"
    )
    user: str = Field(
        default="roombooking", description="Пользователь в базе данных"
    )
    password: SecretStr = Field(
        default=SecretStr(""), description="Пароль от пользователя в базе данных"
    )
    db: str = Field(
        default="roombooking",
        description="Название базы данных к которой подключаемся",
    )

    def build_dsn(self) -> str:
        return URL.create(
            drivername="postgresql+psycopg",
            username=self.user,
            password=self.password.get_secret_value(),
            host=self.host,
            port=self.port,
            database=self.db,
        ).render_as_string(hide_password=False)


class DatabaseConfig(BaseSettings, env_prefix="DATABASE_"):
    """Общие настройки подключения к базе"""

    url: str | None = Field(
        default=None,
        description="Полный DSN, перекрывает настройки POSTGRES_*",
        examples=["sqlite+aiosqlite:///./roombooking.db"],
    )
    echo: bool = Field(default=False, description="Логировать SQL запросы")


class AuthConfig(BaseSettings, env_prefix="AUTH_"):
    """Проверка токенов внешнего провайдера авторизации"""

    secret_key: SecretStr = Field(
        default=SecretStr("change-me"),
        description="Секретный ключ для JWT",
    )
    algorithm: str = Field(default="HS256", description="Алгоритм подписи")
    cookie_name: str = Field(
        default="access_token", description="Cookie в которой лежит access токен"
    )


class AppConfig(BaseSettings, env_prefix="APP_"):
    """Настройки самого приложения"""

    title: str = Field(default="Бронирование переговорных")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
        description="Разрешённые источники для CORS",
    )
    log_level: str = Field(default="INFO", description="Уровень логирования")
    create_tables: bool = Field(
        default=False, description="Создавать таблицы при старте приложения"
    )


class Config(BaseSettings):
    """
    Основной конфиг который будем инициализировать
    """

    app: AppConfig = Field(default_factory=AppConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    postgres: PostgresConfig = Field(default_factory=PostgresConfig)

    def database_dsn(self) -> str:
        return self.database.url or self.postgres.build_dsn()


settings = Config()
