import time
from enum import Enum

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_current_user, get_services
from api.errors import failure_message
from config import settings
from models.requests import ImageGenerationTaskRequest, MarketAnalysisTaskRequest, PublishAnalysisRequest
from models.responses import PublishResponse, TaskResponse
from services.container import Services
from services.errors import InputValidationError, NotFoundError

router = APIRouter(prefix="/api/tasks", tags=["tasks"])

TASKS = "tasks"
PUBSUB_MESSAGES = "pubsub_messages"


class TaskType(str, Enum):
    MARKET_ANALYSIS = "market_analysis"
    IMAGE_GENERATION = "image_generation"


async def _schedule(services: Services, user_id: str, task_type: TaskType, data: dict) -> TaskResponse:
    payload = {"type": task_type.value, "data": {**data, "user_id": user_id}}
    task_name = await services.queue.create_task(payload)
    await services.store.append(
        user_id, TASKS, task_type.value,
        {"task_name": task_name, "status": "scheduled", "payload": payload},
    )
    return TaskResponse(task_name=task_name)


@router.post("/schedule-market-analysis", response_model=TaskResponse)
async def schedule_market_analysis(
    body: MarketAnalysisTaskRequest,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    with failure_message("Task Scheduling", "Failed to schedule market analysis"):
        return await _schedule(services, user_id, TaskType.MARKET_ANALYSIS, body.model_dump())


@router.post("/schedule-image-generation", response_model=TaskResponse)
async def schedule_image_generation(
    body: ImageGenerationTaskRequest,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    with failure_message("Task Scheduling", "Failed to schedule image generation"):
        return await _schedule(services, user_id, TaskType.IMAGE_GENERATION, body.model_dump())


@router.post("/publish-analysis", response_model=PublishResponse)
async def publish_analysis(
    body: PublishAnalysisRequest,
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    topic = settings.pubsub_topics.get(body.type.upper())
    if not topic:
        raise InputValidationError("Invalid analysis type")

    message = {**body.data, "user_id": user_id, "timestamp": int(time.time() * 1000)}
    with failure_message("Message Publishing", "Failed to publish message"):
        message_id = await services.queue.publish(topic, message)
        await services.store.append(
            user_id, PUBSUB_MESSAGES, body.type.lower(),
            {"message_id": message_id, "status": "published", "data": message},
        )
    return PublishResponse(message_id=message_id)


@router.get("/task-status/{task_id}")
async def task_status(
    task_id: str,
    task_type: TaskType = Query(..., alias="type"),
    user_id: str = Depends(get_current_user),
    services: Services = Depends(get_services),
):
    with failure_message("Task Status", "Failed to get task status"):
        task = await services.store.get_entry(user_id, TASKS, task_type.value, task_id)
    if task is None:
        raise NotFoundError("Task not found")
    return task
