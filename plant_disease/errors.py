# errors.py


class PlantDiseaseError(Exception):
	"""Base class for everything the classification pipeline raises."""


class InvalidImage(PlantDiseaseError):
	"""The image could not be decoded, or has zero width or height."""


class ModelUnavailable(PlantDiseaseError):
	"""The model file could not be loaded, or the interpreter was released."""


class EmptyScoreVector(PlantDiseaseError):
	"""The model returned no scores, so there is nothing to pick from."""
