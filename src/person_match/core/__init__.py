"""
Shared orchestration pieces: run context, pipeline and exception types.
"""
