from __future__ import annotations
import json
from typing import Any, Dict
from fastapi import Body, Depends, FastAPI
from fastapi.responses import JSONResponse
from shared.config import settings
from shared.product_handler import ProductCreator

app = FastAPI(title="Product Create API", version="1.0.0")

# Local stand-in for the API Gateway stage; ENVIRONMENT plays the stage variable
def get_creator() -> ProductCreator:
    return ProductCreator(settings.dev_table, settings.prod_table)

def get_environment() -> str:
    return settings.environment

@app.get("/ping")
def ping():
    return {
        "ok": True,
        "region": settings.aws_region,
        "environment": settings.environment,
    }

@app.post("/products")
def create_product(
    payload: Any = Body(None),
    creator: ProductCreator = Depends(get_creator),
    environment: str = Depends(get_environment),
):
    """
    Same contract as the Lambda: 200 with the store result, 400 with
    VALIDATION_ERROR details, or 500 with INTERNAL_ERROR.
    """
    event: Dict[str, Any] = {
        "body-json": payload,
        "stage-variables": {"ENVIRONMENT": environment} if environment else {},
    }
    resp = creator.handle(event)
    return JSONResponse(status_code=resp["statusCode"], content=json.loads(resp["body"]))
