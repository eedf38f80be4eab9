from dotenv import load_dotenv
import os

# .env 읽어오기
load_dotenv()

# HipChat API
HIPCHAT_AUTH_TOKEN = os.getenv("HIPCHAT_AUTH_TOKEN", "")
HIPCHAT_USERNAME = os.getenv("HIPCHAT_USERNAME", "Seyren Alert")
HIPCHAT_BASE_URL = os.getenv("HIPCHAT_BASE_URL", "https://api.hipchat.com")

# room 하나당 요청 타임아웃 (초)
HIPCHAT_TIMEOUT = float(os.getenv("HIPCHAT_TIMEOUT", "5.0"))

# 체크 링크 생성용 모니터링 웹 UI 주소
SEYREN_BASE_URL = os.getenv("SEYREN_BASE_URL", "http://localhost:8080/seyren")

# Environment
ENV = os.getenv("ENV", "development")

# Production 환경 검증
if ENV == "production":
    if not HIPCHAT_AUTH_TOKEN:
        raise RuntimeError("HIPCHAT_AUTH_TOKEN is not set")
