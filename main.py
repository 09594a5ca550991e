from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse

from db.database import init_db
from env import HOME_REGION, PORT
from logger_manager import log_info
from routers.history import router as history_router
from routers.product import router as product_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    log_info(f"Starting EcoScan API (home region: {HOME_REGION})")
    init_db()
    yield


app = FastAPI(title="EcoScan API", lifespan=lifespan)


@app.get("/")
def read_root():
    return RedirectResponse("/docs")


# log every request
@app.middleware("http")
async def log_requests(request: Request, call_next):
    response = await call_next(request)
    log_info(f"Request: {request.method} {request.url} -> {response.status_code}")
    return response


app.include_router(product_router, prefix="/api/product")
app.include_router(history_router, prefix="/api/history")

# To run the FastAPI app, use the command: uvicorn main:app --reload
if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=PORT)
