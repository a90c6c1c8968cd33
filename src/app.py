# ============================================================
# Semester Planner relay API
# ------------------------------------------------------------
# Thin backend for the planner frontend:
#   - POST /api/ai         prompt -> upstream model -> {text}
#   - POST /send-reminder  reminder email to the configured recipient
#   - health checks
# Upstream model is chosen by AI_PROVIDER (gemini, openai, ollama, echo).
# ============================================================

from typing import Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# --- Local imports ---
from src.settings import settings
from src.log import get_logger
from src.relay import ModelRelay, UpstreamModelError, build_model_client
from src.relay.auth import require_bearer
from src.mail import MailDeliveryError, ReminderEmail, ReminderSender, build_reminder_sender

logger = get_logger("src.app")

# ------------------------------------------------------------
# 🔧 Upstream model + mail transport
# ------------------------------------------------------------
relay = ModelRelay(model_client=build_model_client(settings), config_path=settings.RELAY_CONFIG_PATH)
reminder_sender = build_reminder_sender(settings)


def get_relay() -> ModelRelay:
    return relay


def get_reminder_sender() -> ReminderSender:
    return reminder_sender


def get_recipient() -> Optional[str]:
    return settings.RECIPIENT_EMAIL

# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title=settings.app_name, version="0.3")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class AIRequest(BaseModel):
    prompt: str = Field(..., min_length=1)
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None


class AIResponse(BaseModel):
    text: str


class ReminderRequest(BaseModel):
    subject: Optional[str] = None
    text: Optional[str] = None
    html: Optional[str] = None


class ReminderResponse(BaseModel):
    message: str

# ------------------------------------------------------------
# 💬 Generation relay
# ------------------------------------------------------------
@app.post("/api/ai", response_model=AIResponse)
def generate(req: AIRequest, _token: Optional[str] = Depends(require_bearer), model_relay: ModelRelay = Depends(get_relay)):
    try:
        text, _meta = model_relay.complete(req.prompt, temperature=req.temperature, max_tokens=req.max_tokens)
    except UpstreamModelError as e:
        logger.error("upstream model failed: %s", e)
        raise HTTPException(status_code=500, detail="Failed to generate content")
    return AIResponse(text=text)

# ------------------------------------------------------------
# ✉️ Reminder relay
# ------------------------------------------------------------
@app.post("/send-reminder", response_model=ReminderResponse)
def send_reminder(
    req: ReminderRequest,
    sender: ReminderSender = Depends(get_reminder_sender),
    recipient: Optional[str] = Depends(get_recipient),
):
    if not recipient:
        raise HTTPException(status_code=400, detail="Recipient email not configured on server.")
    if not req.subject or not (req.text or req.html):
        raise HTTPException(status_code=400, detail="Missing required email fields")

    try:
        sender.send(ReminderEmail(to_address=recipient, subject=req.subject, text=req.text, html=req.html))
    except MailDeliveryError:
        raise HTTPException(status_code=500, detail="Failed to send email")
    return ReminderResponse(message="Email sent successfully")

# ------------------------------------------------------------
# 🧭 Health checks
# ------------------------------------------------------------
@app.get("/healthz")
def healthz():
    return {
        "ok": True,
        "env": settings.ENV,
        "debug": settings.DEBUG,
        "app": settings.app_name,
        "engine": relay.engine,
    }


@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV}


@app.get("/")
def hello():
    return {"message": "Semester Planner relay running."}
