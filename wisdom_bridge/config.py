# wisdom_bridge/config.py
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# LLM Configuration
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "ollama").lower()
OLLAMA_BASE_URL = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")
OLLAMA_MODEL = os.getenv("OLLAMA_MODEL", "llama3")
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-flash-latest")

# Applied to every harm category the provider supports
SAFETY_BLOCK_THRESHOLD = os.getenv("SAFETY_BLOCK_THRESHOLD", "BLOCK_NONE")

RECOMMENDATION_TEMPERATURE = float(os.getenv("RECOMMENDATION_TEMPERATURE", "0.2"))
CHAT_TEMPERATURE = float(os.getenv("CHAT_TEMPERATURE", "0.7"))

# Mentor Store Configuration
MENTOR_STORE_BACKEND = os.getenv("MENTOR_STORE_BACKEND", "memory").lower()
MENTOR_STORE_LATENCY = float(os.getenv("MENTOR_STORE_LATENCY", "0.05"))

# MongoDB Configuration
MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017/")
MONGODB_DB = os.getenv("MONGODB_DB", "wisdom_bridge")
MONGODB_MENTOR_COLLECTION = os.getenv("MONGODB_MENTOR_COLLECTION", "mentors")

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "console")

# System Configuration
DEBUG = os.getenv("DEBUG", "False").lower() == "true"
