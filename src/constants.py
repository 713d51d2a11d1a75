class Detection:
    CONFIDENCE = 0.7  # 모든 후보 영역에 부여되는 고정 신뢰도
    CELL_SIZE = 100
    SAMPLE_STRIDE = 5
    BRIGHTNESS_THRESHOLD = 200  # 이 값 초과면 밝은(흰 배경) 픽셀
    MIN_WHITE_RATIO = 0.3
    MAX_WHITE_RATIO = 0.7
    MIN_REGION_SIZE = 50
    MAX_REGION_SIZE = 1000


class Language:
    EN = "en"
    JA = "ja"
    ZH = "zh"
    KO = "ko"
    ES = "es"
    FR = "fr"
    DE = "de"

    NAMES = {
        EN: "English",
        JA: "Japanese",
        ZH: "Chinese",
        KO: "Korean",
        ES: "Spanish",
        FR: "French",
        DE: "German",
    }


def language_name(code: str) -> str:
    """언어 코드 → 표시 이름 (모르는 코드는 "Unknown")"""
    return Language.NAMES.get(code, "Unknown")


class Limits:
    MAX_UPLOAD_SIZE = 10 * 1024 * 1024  # 10MB
    MAX_PIXELS = 3_000_000
