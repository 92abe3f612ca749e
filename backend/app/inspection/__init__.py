from backend.app.inspection.inspection_resolver import get_inspection_result

__all__ = ["get_inspection_result"]
