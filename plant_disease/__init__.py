# __init__.py
#    TFLiteAdapter lives in plant_disease.inference; it is not imported
#    here so the pure pieces don't pull in TensorFlow.

from plant_disease.adapter import InferenceAdapter
from plant_disease.classifier import DiseaseClassifier, Prediction, argmax, format_result
from plant_disease.errors import (
	EmptyScoreVector,
	InvalidImage,
	ModelUnavailable,
	PlantDiseaseError,
)
from plant_disease.preprocessing import load_image, preprocess

__version__ = "0.1.0"
