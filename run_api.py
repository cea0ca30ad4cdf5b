#!/usr/bin/env python3
"""
Simple script to run the Shipment Forecasting API server.
"""

import logging

import uvicorn
from shipment_forecasting.config import settings
from shipment_forecasting.api.main import app

if __name__ == "__main__":
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    log = logging.getLogger("shipment_forecasting")
    log.info("Starting Shipment Forecasting API at http://localhost:8000 (docs at /docs)")

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        log_level=settings.log_level.lower()
    )
