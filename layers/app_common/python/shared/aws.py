from __future__ import annotations
import boto3
from botocore.config import Config
from .config import settings

_ddb = None

def dynamodb_resource():
    global _ddb
    if _ddb is None:
        _ddb = boto3.resource(
            "dynamodb",
            region_name=settings.aws_region,
            config=Config(retries={"max_attempts": 3, "mode": "standard"}),
        )
    return _ddb
