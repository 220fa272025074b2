"""Reference vocabulary for the food catalog."""

FOOD_CATEGORY_LABELS = {
    "protein": "Proteins",
    "carbs": "Carbohydrates",
    "fats": "Healthy Fats",
    "vegetables": "Vegetables",
    "fruits": "Fruits",
    "dairy": "Dairy",
    "grains": "Grains",
    "nuts-seeds": "Nuts & Seeds",
    "beverages": "Beverages",
    "supplements": "Supplements",
}

FOOD_CATEGORIES = tuple(FOOD_CATEGORY_LABELS)

FOOD_CATEGORY_COLORS = {
    "protein": "error",
    "carbs": "warning",
    "fats": "info",
    "vegetables": "success",
    "fruits": "secondary",
    "dairy": "primary",
    "grains": "warning",
    "nuts-seeds": "info",
    "beverages": "info",
    "supplements": "secondary",
}

FOOD_SUBCATEGORY_LABELS = {
    # protein
    "poultry": "Poultry",
    "fish": "Fish & Seafood",
    "meat": "Meat",
    "organ-meat": "Organ Meats",
    "dairy": "Dairy Products",
    "plant-protein": "Plant Proteins",
    "legumes": "Legumes",
    "supplements": "Supplements",
    # carbs
    "grains": "Grains & Cereals",
    "vegetables": "Vegetables",
    "fruits": "Fruits",
    "sweeteners": "Sweeteners",
    "crackers": "Crackers",
    "cereals": "Cereals",
    # fats
    "oils": "Oils",
    "nuts": "Nuts",
    "seeds": "Seeds",
    "avocado": "Avocado",
    "chocolate": "Chocolate",
    "dairy-fats": "Dairy Fats",
    # dairy
    "cheese": "Cheese",
    "milk": "Milk",
    "plant-milk": "Plant Milk",
    "yogurt": "Yogurt",
    # vegetables
    "leafy-greens": "Leafy Greens",
    "cruciferous": "Cruciferous",
    "root-vegetables": "Root Vegetables",
    "nightshades": "Nightshades",
    "green-vegetables": "Green Vegetables",
    "squash": "Squash",
    "fungi": "Mushrooms",
    "mixed": "Mixed Vegetables",
    # fruits
    "berries": "Berries",
    "citrus": "Citrus",
    "tropical": "Tropical",
    "stone-fruits": "Stone Fruits",
    "fresh": "Fresh Fruits",
    # grains
    "oats": "Oats",
    "pseudocereal": "Pseudocereals",
    "rice": "Rice",
    "rice-products": "Rice Products",
    "bread": "Bread",
    # nuts and seeds
    "tree-nuts": "Tree Nuts",
    "nut-butter": "Nut Butters",
}

DIETARY_TAG_LABELS = {
    "high-protein": "High Protein",
    "low-carb": "Low Carb",
    "keto-friendly": "Keto Friendly",
    "paleo": "Paleo",
    "vegan": "Vegan",
    "vegetarian": "Vegetarian",
    "gluten-free": "Gluten Free",
    "dairy-free": "Dairy Free",
    "low-calorie": "Low Calorie",
    "high-fiber": "High Fiber",
    "antioxidant-rich": "Antioxidant Rich",
    "omega-3": "Omega-3",
    "heart-healthy": "Heart Healthy",
    "probiotic": "Probiotic",
    "whole-grain": "Whole Grain",
    "organic": "Organic",
}

DIETARY_TAGS = tuple(DIETARY_TAG_LABELS)

DIETARY_TAG_COLORS = {
    "high-protein": "error",
    "low-carb": "success",
    "keto-friendly": "info",
    "paleo": "warning",
    "vegan": "success",
    "vegetarian": "success",
    "gluten-free": "primary",
    "dairy-free": "primary",
    "low-calorie": "success",
    "high-fiber": "secondary",
    "antioxidant-rich": "secondary",
    "omega-3": "info",
    "heart-healthy": "error",
    "probiotic": "primary",
    "whole-grain": "warning",
    "organic": "success",
}

ALLERGEN_LABELS = {
    "dairy": "Dairy",
    "eggs": "Eggs",
    "fish": "Fish",
    "shellfish": "Shellfish",
    "tree-nuts": "Tree Nuts",
    "peanuts": "Peanuts",
    "wheat": "Wheat",
    "soy": "Soy",
    "sesame": "Sesame",
    "gluten": "Gluten",
}

SORT_OPTION_LABELS = {
    "name-asc": "Name A-Z",
    "name-desc": "Name Z-A",
    "calories-asc": "Calories Low-High",
    "calories-desc": "Calories High-Low",
    "protein-asc": "Protein Low-High",
    "protein-desc": "Protein High-Low",
    "created-asc": "Oldest First",
    "created-desc": "Newest First",
}
