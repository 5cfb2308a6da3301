"""Cloud Tasks scheduling and Pub/Sub publishing for background analyses."""

import asyncio
import json
import logging
from datetime import datetime
from typing import Any

from google.api_core import exceptions as google_exceptions
from google.cloud import tasks_v2
from google.protobuf import timestamp_pb2

from services.errors import UpstreamError

logger = logging.getLogger(__name__)


class TaskQueue:
    def __init__(
        self,
        tasks_client: Any,
        publisher: Any,
        project: str,
        location: str,
        queue: str,
        handler_url: str,
    ) -> None:
        self._tasks = tasks_client
        self._publisher = publisher
        self._project = project
        self._location = location
        self._queue = queue
        self._handler_url = handler_url.rstrip("/")

    async def create_task(self, payload: dict[str, Any], schedule_time: datetime | None = None) -> str:
        """Queue an HTTP POST of ``payload`` to the task handler; returns the task name."""
        task: dict[str, Any] = {
            "http_request": {
                "http_method": tasks_v2.HttpMethod.POST,
                "url": f"{self._handler_url}/processTask",
                "headers": {"Content-Type": "application/json"},
                "body": json.dumps(payload).encode("utf-8"),
            }
        }
        if schedule_time is not None:
            stamp = timestamp_pb2.Timestamp()
            stamp.FromDatetime(schedule_time)
            task["schedule_time"] = stamp

        parent = self._tasks.queue_path(self._project, self._location, self._queue)
        try:
            response = await self._tasks.create_task(request={"parent": parent, "task": task})
        except google_exceptions.GoogleAPIError as e:
            logger.error("Cloud Tasks create_task failed: %s", e)
            raise UpstreamError("Task queue unavailable") from e
        return response.name

    async def publish(self, topic: str, message: dict[str, Any]) -> str:
        topic_path = self._publisher.topic_path(self._project, topic)
        data = json.dumps(message, default=str).encode("utf-8")
        try:
            future = self._publisher.publish(topic_path, data)
            return await asyncio.to_thread(future.result)
        except google_exceptions.GoogleAPIError as e:
            logger.error("Pub/Sub publish to %s failed: %s", topic, e)
            raise UpstreamError("Message bus unavailable") from e
