import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    # Google Cloud project used by Vertex AI, Natural Language, Tasks and Pub/Sub
    gcp_project: str = ""
    gcp_location: str = "us-central1"

    # Prediction backend. With gemini_api_key set the API-key endpoint is used,
    # otherwise Vertex AI in gcp_project/gcp_location.
    gemini_api_key: str = ""
    prediction_model: str = "gemini-2.5-flash"

    # Firebase (auth + Firestore). Empty path means application default credentials.
    firebase_credentials_path: str = ""
    firebase_api_key: str = ""
    firebase_auth_domain: str = ""
    firebase_storage_bucket: str = ""
    firebase_messaging_sender_id: str = ""
    firebase_app_id: str = ""

    # Input limits
    max_text_bytes: int = 1_000_000
    max_upload_size_mb: int = 5
    storage_max_upload_size_mb: int = 10

    # Cloud Storage buckets
    documents_bucket: str = "genai-documents"
    images_bucket: str = "genai-images"
    presentations_bucket: str = "genai-presentations"

    # Cloud Tasks + Pub/Sub
    tasks_location: str = "us-central1"
    tasks_queue: str = "genai-tasks"
    task_handler_url: str = ""
    pubsub_topics: dict[str, str] = {
        "MARKET_ANALYSIS": "market-analysis",
        "IMAGE_GENERATION": "image-generation",
        "COMPETITOR_ANALYSIS": "competitor-analysis",
    }

    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    rate_limit: str = "60/minute"
    # Stricter limit on routes that call the prediction backend
    generation_rate_limit: str = "10/minute"
    rate_limit_enabled: bool = True
    log_level: str = "INFO"
    debug: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def firebase_web_config(self) -> dict[str, str]:
        return {
            "apiKey": self.firebase_api_key,
            "authDomain": self.firebase_auth_domain,
            "projectId": self.gcp_project,
            "storageBucket": self.firebase_storage_bucket,
            "messagingSenderId": self.firebase_messaging_sender_id,
            "appId": self.firebase_app_id,
        }


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
