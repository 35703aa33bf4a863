"""
SkyAnswers API - FastAPI Server
Main entry point: receives a Skysmart student link and returns the answers of its tasks.
"""

import os
import logging
from typing import List, Optional
from fastapi import FastAPI, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

from skyanswers import SkyAnswers, TaskAnswer, extract_task_hash, __version__

app = FastAPI(
    title="SkyAnswers API",
    description="Collects correct answers for the tasks of a Skysmart task room",
    version=__version__
)

# Shared secret for callers; unset means the endpoint is open
API_SECRET = os.getenv("SKYANSWERS_SECRET")

SEPARATOR = "━━━━━━━━━━━━━━━━━━━"


@app.get("/")
async def root():
    """Root endpoint with API documentation."""
    html = """
    <!DOCTYPE html>
    <html>
    <head>
        <title>SkyAnswers API</title>
    </head>
    <body>
        <h1>SkyAnswers API</h1>
        <p>Send a Skysmart student link and get the correct answers of every task.</p>

        <h2>Endpoints</h2>
        <div>
            <b>POST</b> <code>/answers</code>
            <p>Collect answers for a task room</p>
            <pre>{
  "url": "https://edu.skysmart.ru/student/xazofekuvi",
  "secret": "your_secret"
}</pre>
        </div>

        <div>
            <b>GET</b> <code>/health</code>
            <p>Health check endpoint</p>
        </div>
    </body>
    </html>
    """
    return HTMLResponse(content=html)


class AnswersRequest(BaseModel):
    """Request model for the answers endpoint."""
    url: str
    secret: Optional[str] = None


class TaskAnswerModel(BaseModel):
    """One task of the room with its answers."""
    task_number: int
    question: str
    answers: List[str]


class AnswersResponse(BaseModel):
    """Response model for the answers endpoint."""
    status: str
    task_hash: str
    count: int
    tasks: List[TaskAnswerModel]
    messages: List[str]


def render_task_answer(answer: TaskAnswer) -> str:
    """Plain-text card for one task, as shown to students."""
    lines = [f"📝 Задание #{answer.task_number}", SEPARATOR, "", answer.question, "", "🔍 ОТВЕТЫ:", ""]
    if len(answer.answers) > 1:
        for i, text in enumerate(answer.answers, 1):
            lines.append(f"✅ Ответ {i}: {text}")
    elif answer.answers:
        lines.append(f"✅ Ответ: {answer.answers[0]}")
    lines.append("")
    lines.append(SEPARATOR)
    return "\n".join(lines)


@app.post("/answers", response_model=AnswersResponse)
def get_answers(request: AnswersRequest):
    """
    Collect answers for the room behind a student link.

    - Returns 403 if SKYANSWERS_SECRET is set and does not match
    - Returns 400 if the link does not contain a task hash
    - Returns 200 with status "not_found" when no task produced answers
    """
    if API_SECRET and request.secret != API_SECRET:
        raise HTTPException(
            status_code=403,
            detail="Invalid secret provided"
        )

    task_hash = extract_task_hash(request.url)
    if not task_hash:
        raise HTTPException(
            status_code=400,
            detail="Invalid link format, send the full task link"
        )

    logger.info(f"Collecting answers for room {task_hash}")
    answers = SkyAnswers().get_answers(task_hash)

    return AnswersResponse(
        status="ok" if answers else "not_found",
        task_hash=task_hash,
        count=len(answers),
        tasks=[TaskAnswerModel(**answer.to_dict()) for answer in answers],
        messages=[render_task_answer(answer) for answer in answers]
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc):
    """Handle request body validation errors."""
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid JSON body", "errors": jsonable_encoder(exc.errors())}
    )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    """Handle general exceptions."""
    logger.error(f"Unexpected error: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "7860")))
