import os
from dataclasses import dataclass, field


# Configuration Classes
@dataclass
class ApiConfig:
    base_url: str = os.getenv('SMARTCARE_API_URL', 'http://localhost:5000')
    timeout: float = float(os.getenv('SMARTCARE_API_TIMEOUT', '10'))

@dataclass
class StorageConfig:
    url: str = os.getenv('SMARTCARE_STORAGE_URL', 'sqlite:///smartcare_client.db')

@dataclass
class AppConfig:
    page_title: str = "Smart Care Hospital Monitoring"
    page_icon: str = "🏥"
    layout: str = "wide"
    login_route: str = "/auth"
    home_route: str = "/"
    default_language: str = os.getenv('SMARTCARE_LANGUAGE', 'ko')
    max_redirect_attempts: int = int(os.getenv('SMARTCARE_MAX_REDIRECTS', '3'))
    log_level: str = os.getenv('SMARTCARE_LOG_LEVEL', 'INFO')

@dataclass
class Settings:
    """Bundle of settings handed to a client instance"""
    api: ApiConfig = field(default_factory=ApiConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    app: AppConfig = field(default_factory=AppConfig)

class Config:
    api = ApiConfig()
    storage = StorageConfig()
    app = AppConfig()

    @classmethod
    def settings(cls) -> Settings:
        return Settings(api=cls.api, storage=cls.storage, app=cls.app)
