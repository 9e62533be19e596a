"""Service layer — operations over pass documents.

Services return ServiceResult and never raise for expected failures.
"""
