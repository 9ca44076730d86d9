CUISINE_OPTIONS = [
    "American",
    "Mexican",
    "Italian",
    "Asian",
    "BBQ",
    "Seafood",
    "Vegetarian",
    "Vegan",
    "Desserts",
    "Coffee/Beverages",
]

MENU_CATEGORY_OPTIONS = [
    "Appetizers",
    "Entrees",
    "Sides",
    "Desserts",
    "Drinks",
    "Specials",
]

DIETARY_TAG_OPTIONS = [
    "Vegetarian",
    "Vegan",
    "Gluten-Free",
    "Dairy-Free",
    "Spicy",
    "Nut-Free",
]

DEFAULT_MENU_NAME = "Main Menu"
