import binascii
import logging

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, Field

from storage_assistant.assistant import ConfigurationMissingError, InventoryAssistant
from storage_assistant.core.config import load_config
from storage_assistant.core.env import configure_logging, load_dotenv_if_present
from storage_assistant.core.models import ChatTurn, Defaulted, InventoryItem

app = FastAPI(title="Storage Assistant API")

load_dotenv_if_present()
configure_logging()

logger = logging.getLogger(__name__)


class AnalyzeRequest(BaseModel):
    image: str


class ChatRequest(BaseModel):
    query: str
    inventory: list[InventoryItem] = Field(default_factory=list)
    history: list[ChatTurn] = Field(default_factory=list)


def get_assistant() -> InventoryAssistant:
    """Resolve configuration per request so credential changes apply immediately."""
    return InventoryAssistant(load_config())


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.post("/analyze")
def analyze(req: AnalyzeRequest, assistant: InventoryAssistant = Depends(get_assistant)) -> dict:
    try:
        outcome = assistant.analyze_item_image_outcome(req.image)
    except ConfigurationMissingError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    except binascii.Error as exc:
        raise HTTPException(status_code=400, detail="Image payload is not valid base64") from exc

    defaulted = isinstance(outcome, Defaulted)
    if defaulted:
        logger.info("Analyze returned default item (%s)", outcome.reason)
    return {
        "item": outcome.record.model_dump(),
        "defaulted": defaulted,
        "reason": outcome.reason if defaulted else None,
    }


@app.post("/chat")
def chat(req: ChatRequest, assistant: InventoryAssistant = Depends(get_assistant)) -> dict:
    reply = assistant.chat_with_inventory(req.query, req.inventory, req.history)
    return {"reply": reply}
