from .gemini_ocr_client import GeminiOcrClient, parse_meter_value

__all__ = ["GeminiOcrClient", "parse_meter_value"]
