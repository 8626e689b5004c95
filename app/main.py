# app/main.py
from typing import List, Optional

from fastapi import APIRouter, Depends, FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import API_PREFIX, CORS_ORIGINS, HOST, PORT
from .core import ProductService
from .database import ProductStore, build_store
from .exceptions import ProductServiceError
from .logger import get_logger
from .models import ErrorResponse, Product, ProductIn, ProductUpdate

logger = get_logger(__name__)


def get_service(request: Request) -> ProductService:
    return request.app.state.service


# ---------------------------
# Product handlers
# ---------------------------
def create_product(payload: ProductIn, service: ProductService = Depends(get_service)) -> Product:
    return service.create(payload)


def list_products(service: ProductService = Depends(get_service)) -> List[Product]:
    return service.list_all()


def get_product(product_id: str, service: ProductService = Depends(get_service)) -> Product:
    return service.get_by_id(product_id)


def update_product(product_id: str, payload: ProductUpdate,
                   service: ProductService = Depends(get_service)) -> Product:
    return service.update(product_id, payload)


def delete_product(product_id: str, service: ProductService = Depends(get_service)) -> Response:
    service.delete(product_id)
    return Response(status_code=200)


# method, path, handler, success status
ROUTES = [
    ("POST", "/products", create_product, 201),
    ("GET", "/products", list_products, 200),
    ("GET", "/products/{product_id}", get_product, 200),
    ("PUT", "/products/{product_id}", update_product, 200),
    ("DELETE", "/products/{product_id}", delete_product, 200),
]

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


def build_router() -> APIRouter:
    router = APIRouter(tags=["products"])
    for method, path, handler, status_code in ROUTES:
        router.add_api_route(
            path, handler, methods=[method], status_code=status_code, responses=ERROR_RESPONSES,
        )
    return router


# ---------------------------
# Error rendering
# ---------------------------
def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(statusCode=status_code, message=message).model_dump(),
    )


async def service_error_handler(request: Request, exc: ProductServiceError):
    return _error(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err.get("loc", ()) if p != "body") or "body"
        problems.append(f"{field}: {err.get('msg')}")
    logger.warning("Malformed request to {} {}: {}", request.method, request.url.path, problems)
    return _error(400, "Invalid request body - " + "; ".join(problems))


def create_app(store: Optional[ProductStore] = None) -> FastAPI:
    if store is None:
        store = build_store()

    app = FastAPI(title="product-service")
    app.state.service = ProductService(store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ProductServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(build_router(), prefix=API_PREFIX)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=HOST, port=PORT)
