"""
Server modules for the SafeSteps application.

This package contains FastAPI router modules for the HTTP API.

Author: SafeSteps Team
Date: 2026-10-16
"""
