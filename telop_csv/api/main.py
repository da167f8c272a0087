from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from telop_csv.api.routes.export import router as export_router
from telop_csv.api.routes.process import router as process_router
from telop_csv.config import settings

app = FastAPI(
    title="Telop CSV API",
    description="Caption timing analysis and CSV export",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_origin_regex=r"http://localhost:\d+",
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(process_router)
app.include_router(export_router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}
