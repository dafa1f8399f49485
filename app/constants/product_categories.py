PRODUCT_CATEGORIES = (
    "For Her",
    "For Him",
    "New Arrivals",
)

# stored on order items whose cart entry had no category
DEFAULT_ITEM_CATEGORY = "Uncategorized"
