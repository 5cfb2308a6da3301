"""Construction of the backend clients shared by every route."""

import logging
from dataclasses import dataclass

import firebase_admin
from firebase_admin import credentials, firestore_async
from google.cloud import language_v1, pubsub_v1, storage, tasks_v2

from config import Settings
from services.file_storage import FileStorage
from services.identity import IdentityProvider
from services.nlp_client import TextSignalExtractor
from services.prediction_client import PredictionClient, create_genai_client
from services.store import ResultStore
from services.task_queue import TaskQueue

logger = logging.getLogger(__name__)


@dataclass
class Services:
    extractor: TextSignalExtractor
    predictor: PredictionClient
    store: ResultStore
    identity: IdentityProvider
    files: FileStorage
    queue: TaskQueue


def init_firebase(settings: Settings) -> firebase_admin.App:
    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    cred = (
        credentials.Certificate(settings.firebase_credentials_path)
        if settings.firebase_credentials_path
        else credentials.ApplicationDefault()
    )
    options = {"projectId": settings.gcp_project} if settings.gcp_project else None
    logger.info("Initializing Firebase app (project=%s)", settings.gcp_project or "<default>")
    return firebase_admin.initialize_app(cred, options)


def build_services(settings: Settings) -> Services:
    app = init_firebase(settings)
    project = settings.gcp_project or app.project_id

    genai_client = create_genai_client(
        api_key=settings.gemini_api_key,
        project=project,
        location=settings.gcp_location,
    )

    return Services(
        extractor=TextSignalExtractor(
            language_v1.LanguageServiceAsyncClient(),
            max_text_bytes=settings.max_text_bytes,
        ),
        predictor=PredictionClient(genai_client, settings.prediction_model),
        store=ResultStore(firestore_async.client(app)),
        identity=IdentityProvider(app),
        files=FileStorage(storage.Client(project=project)),
        queue=TaskQueue(
            tasks_v2.CloudTasksAsyncClient(),
            pubsub_v1.PublisherClient(),
            project=project,
            location=settings.tasks_location,
            queue=settings.tasks_queue,
            handler_url=settings.task_handler_url,
        ),
    )
