import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load the appropriate .env file on module import
env = os.environ.get("STUDYDB_ENV", "development").lower()
env_file = f".env.{env}"
if os.path.exists(env_file):
    load_dotenv(env_file)
else:
    # Fall back to the default .env file
    load_dotenv()

DEFAULT_TIMEOUT = 10.0


def _timeout_from_env(value: str | None) -> float:
    """Parse MONGO_TIMEOUT, applying the default when unset or not positive."""
    if not value:
        return DEFAULT_TIMEOUT
    timeout = float(value)
    return timeout if timeout > 0 else DEFAULT_TIMEOUT


@dataclass
class Config:
    environment: str
    mongo_uri: str
    database_name: str
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            environment=env,
            mongo_uri=os.environ.get("MONGO_URI", "mongodb://localhost:27017"),
            database_name=os.environ.get("MONGO_DATABASE", "study"),
            timeout=_timeout_from_env(os.environ.get("MONGO_TIMEOUT")),
        )

    @property
    def timeout_ms(self) -> int:
        return int(self.timeout * 1000)


config = Config.from_env()
