import logging

from fastapi import FastAPI

from academics.core.error_handlers import add_error_handlers
from academics.core.logging_middleware import LoggingMiddleware
from academics.db.init_db import init_db
from academics.routers.courses import router as courses_router
from academics.routers.grades import router as grades_router
from academics.routers.stats import router as stats_router
from academics.routers.students import router as students_router

logging.basicConfig(level=logging.INFO)

app = FastAPI(title="Academic Records")

# Middleware
app.add_middleware(LoggingMiddleware)

# Domain errors -> JSON envelopes
add_error_handlers(app)


# Health check
@app.get("/health")
def health():
    return {"status": "ok"}


# Startup event
@app.on_event("startup")
def on_startup():
    init_db()


# Include routers
app.include_router(students_router, prefix="/students", tags=["students"])
app.include_router(courses_router, prefix="/courses", tags=["courses"])
app.include_router(grades_router, prefix="/grades", tags=["grades"])
app.include_router(stats_router, prefix="/stats", tags=["stats"])
