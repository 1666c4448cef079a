from __future__ import annotations
import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass(frozen=True)
class Settings:
    aws_region: str = os.getenv("AWS_REGION", "us-west-2")
    stage: str = os.getenv("STAGE", "dev")

    # DynamoDB
    dev_table: str = os.getenv("DEV_TABLENAME", "")
    prod_table: str = os.getenv("PROD_TABLENAME", "")

    # Stage variable used by the local API (API Gateway provides it in AWS)
    environment: str = os.getenv("ENVIRONMENT", "DEV")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_json: bool = os.getenv("LOG_JSON", "false").lower() == "true"

settings = Settings()
