from fastapi import APIRouter

from ..services.topics import RANDOM_TOPICS, random_topic

router = APIRouter()

@router.get("/api/topics")
def topics():
    return {"topics": list(RANDOM_TOPICS)}

@router.get("/api/topics/random")
def topics_random():
    return {"topic": random_topic()}
