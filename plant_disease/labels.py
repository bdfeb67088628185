# labels.py

from types import MappingProxyType

# The 15 class names in the EXACT order of the model's output vector.
LABELS = (
	"Pepper – Bacterial spot",
	"Pepper – Healthy",
	"Potato – Early blight",
	"Potato – Late blight",
	"Potato – Healthy",
	"Tomato – Bacterial spot",
	"Tomato – Early blight",
	"Tomato – Late blight",
	"Tomato – Leaf Mold",
	"Tomato – Septoria leaf spot",
	"Tomato – Spider mites",
	"Tomato – Target Spot",
	"Tomato – Yellow Leaf Curl Virus",
	"Tomato – Mosaic virus",
	"Tomato – Healthy",
)

# Not every label has an entry (healthy leaves need nothing).
PESTICIDE_SUGGESTIONS = MappingProxyType({
	"Pepper – Bacterial spot": "Use Copper Oxychloride, 2g/L",
	"Potato – Early blight": "Use Mancozeb, 2g/L",
	"Potato – Late blight": "Use Metalaxyl, 1.5g/L",
	"Tomato – Early blight": "Use Chlorothalonil, 2g/L",
	"Tomato – Late blight": "Use Fosetyl-Al, 3g/L",
	"Tomato – Leaf Mold": "Use Copper Hydroxide, 2.5g/L",
	"Tomato – Septoria leaf spot": "Use Mancozeb, 2g/L",
	"Tomato – Yellow Leaf Curl Virus": "Use Imidacloprid 17.8% SL, 1ml/L",
	"Tomato – Mosaic virus": "Use systemic insecticide, avoid aphids",
	"Tomato – Spider mites": "Use Abamectin, 1.5ml/L",
	"Tomato – Target Spot": "Use Azoxystrobin, 1ml/L",
})

NO_SUGGESTION = "No pesticide suggestion available."
