import uvicorn
from bookstore.core.config import settings


if __name__ == "__main__":
    uvicorn.run("bookstore.main:app", host=settings.HOST, port=settings.PORT, workers=1)
