from __future__ import annotations
from shared.config import settings
from shared.product_handler import ProductCreator

creator = ProductCreator(settings.dev_table, settings.prod_table)

def handler(event, _ctx):
    return creator.handle(event)
