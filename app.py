# app.py

import atexit
import logging

import streamlit as st

from plant_disease.classifier import DiseaseClassifier, format_result
from plant_disease.config import (
	ALLOWED_TYPES,
	DISPLAY_MAX_SIDE,
	INPUT_SIZE,
	LOG_FORMAT,
	LOG_LEVEL,
	MODEL_PATH,
)
from plant_disease.errors import EmptyScoreVector, InvalidImage, ModelUnavailable
from plant_disease.inference import TFLiteAdapter
from plant_disease.labels import LABELS
from plant_disease.preprocessing import load_image

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger("plant_disease.app")

GALLERY = "Select from gallery"
CAMERA = "Capture photo"

# ——————————————————————————————
# 1. Page Configuration
st.set_page_config(
	page_title="Plant Disease Tracker",
	page_icon="🌿",
	layout="centered",
)

# ——————————————————————————————
# 2. Load the TFLite model once per process
@st.cache_resource(show_spinner=False)
def load_classifier(path):
	"""
	Opens the interpreter and wraps it in a DiseaseClassifier.
	Raises ModelUnavailable (not cached) if the file can't be loaded.
	The interpreter is released once, when the process exits.
	"""
	adapter = TFLiteAdapter(path, num_labels=len(LABELS))
	atexit.register(adapter.close)
	return DiseaseClassifier(adapter, input_size=INPUT_SIZE)


# ——————————————————————————————
# 3. Main App UI
def main():
	st.title("🌿 Plant Disease Tracker")
	st.write(
		"""
		Pick or photograph a pepper, potato or tomato leaf, and the model
		will predict its disease and suggest a pesticide.
		"""
	)

	try:
		classifier = load_classifier(MODEL_PATH)
	except ModelUnavailable:
		st.error("Failed to load model.")
		return

	source = st.radio("Image source", [GALLERY, CAMERA], horizontal=True)

	# 3a. Get the picture
	if source == GALLERY:
		uploaded_file = st.file_uploader(
			label="Choose a leaf image (JPG/PNG)",
			type=ALLOWED_TYPES,
		)
		max_side = None
	else:
		uploaded_file = st.camera_input("Take a photo of the leaf")
		max_side = DISPLAY_MAX_SIDE

	if uploaded_file is None:
		if source == CAMERA:
			st.caption("Camera permission is required to capture images.")
		else:
			st.write("Please select a leaf image to see predictions.")
		return

	# 3b. Decode, show and classify it
	try:
		img = load_image(uploaded_file.getvalue(), max_side=max_side)
		st.image(img, caption="Selected Leaf")
		with st.spinner("Model is classifying..."):
			prediction = classifier.classify(img)
	except InvalidImage:
		logger.exception("Image loading failed")
		st.error("Failed to process image.")
		return
	except EmptyScoreVector as e:
		logger.error("Bad model output: %s", e)
		st.error(str(e))
		return

	# 3c. Display results
	st.text(format_result(prediction))


if __name__ == "__main__":
	main()
