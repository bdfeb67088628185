# config.py

import os
import logging

# ——————————————————————————————
# Model
#    The .tflite export lives next to the app, in the "models" folder.
MODEL_PATH = os.path.join("models", "plant_model.tflite")

# Side of the square input the model was trained on (48×48 RGB).
INPUT_SIZE = 48

# ——————————————————————————————
# Images
ALLOWED_TYPES = ["jpg", "jpeg", "png"]

# Captured photos are decoded at roughly this size at most.
DISPLAY_MAX_SIDE = 1024

# ——————————————————————————————
# Logging
LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
