import logging
from fastapi import FastAPI
from .config import get_bind, get_log_level
from .writing.api import router as writing_router

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Kana Writing PoC")
app.include_router(writing_router)

@app.get("/health")
def health():
    return {"status": "ok"}

def serve():
    import uvicorn
    host, port = get_bind()
    uvicorn.run(app, host=host, port=port)

if __name__ == "__main__":
    serve()
