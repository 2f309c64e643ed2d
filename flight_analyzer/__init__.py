"""
Flight data analyzer: validated flight legs and inconsistent flight chains
served over FastAPI.

Run with:
    uvicorn flight_analyzer.main:app
"""
