# classifier.py

import logging
from collections import namedtuple

import numpy as np

from plant_disease.config import INPUT_SIZE
from plant_disease.errors import EmptyScoreVector
from plant_disease.labels import LABELS, NO_SUGGESTION, PESTICIDE_SUGGESTIONS
from plant_disease.preprocessing import preprocess

logger = logging.getLogger(__name__)

# confidence is a percentage of the raw top score (not clamped, not softmaxed).
# advice is None when the label has no pesticide suggestion.
Prediction = namedtuple("Prediction", ["label", "confidence", "advice"])


def argmax(scores):
	"""Index of the highest score; ties go to the lowest index."""
	scores = np.asarray(scores, dtype=np.float64).reshape(-1)
	if scores.size == 0:
		raise EmptyScoreVector("Model returned an empty score vector")
	return int(np.argmax(scores))


class DiseaseClassifier:

	def __init__(self, adapter, labels=LABELS, recommendations=PESTICIDE_SUGGESTIONS,
			input_size=INPUT_SIZE):
		self.adapter = adapter
		self.labels = tuple(labels)
		self.recommendations = recommendations
		self.input_size = input_size

	def classify(self, image):
		tensor = preprocess(image, self.input_size)
		scores = np.asarray(self.adapter.infer(tensor), dtype=np.float64).reshape(-1)

		idx = argmax(scores)
		label = self.labels[idx]
		confidence = float(scores[idx]) * 100
		advice = self.recommendations.get(label)

		logger.info("Prediction: %s (%.2f%%)", label, confidence)
		return Prediction(label, confidence, advice)


def format_result(prediction):
	advice = prediction.advice or NO_SUGGESTION
	return (
		f"Prediction: {prediction.label}\n"
		f"Confidence: {prediction.confidence:.2f}%"
		f"\n\nPesticide Suggestion:\n{advice}"
	)
