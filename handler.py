"""
AWS Lambda handler — Mangum wrapper for the VibeGuard FastAPI app.
"""

from mangum import Mangum

from vibeguard.main import app

handler = Mangum(app, lifespan="off")
