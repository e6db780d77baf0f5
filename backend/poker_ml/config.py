# poker_ml/config.py
import os

DATA_FILE = os.getenv("POKER_DATA_FILE", "poker_data.json")
MODEL_FILE = os.getenv("POKER_MODEL_FILE", "poker_model.joblib")
LOG_LEVEL = os.getenv("POKER_LOG_LEVEL", "INFO").upper()

# store capacity, oldest records are dropped first
MAX_RECORDS = 500

# training only runs once the store holds more than this many records
TRAIN_MIN_RECORDS = 20
PREDICT_MIN_RECORDS = 10
TRAIN_RATIO = 0.8

INSUFFICIENT_DATA = "Pas assez de données"
