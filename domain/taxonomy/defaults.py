"""Built-in taxonomy used whenever the CSV resource cannot be loaded."""

from domain.taxonomy.model import FlavorTaxonomy

DEFAULT_TAXONOMY = FlavorTaxonomy(
    source="default",
    categories={
        "FRUITS": {
            "CITRUS": ["LEMON", "LIME", "GRAPEFRUIT", "ORANGE"],
            "STONE FRUIT": ["PEACH", "APRICOT", "PLUM"],
            "BERRY": ["STRAWBERRY", "RASPBERRY", "BLUEBERRY", "BLACKBERRY"],
            "TROPICAL": ["MANGO", "PINEAPPLE", "BANANA", "COCONUT"],
            "POME": ["APPLE", "PEAR"],
        },
        "SPICES": {
            "SWEET": ["CINNAMON", "VANILLA", "NUTMEG", "CLOVE"],
            "HOT": ["CHILI", "PEPPER", "GINGER", "WASABI"],
            "AROMATIC": ["BASIL", "OREGANO", "THYME", "ROSEMARY"],
        },
        "NUTS": {
            "TREE NUTS": ["ALMOND", "WALNUT", "CASHEW", "PECAN"],
            "LEGUMES": ["PEANUT", "SOYBEAN"],
            "SEEDS": ["SUNFLOWER", "PUMPKIN"],
        },
        "VEGETABLES": {
            "LEAFY GREENS": ["LETTUCE", "SPINACH", "KALE", "ARUGULA"],
            "ROOT": ["CARROT", "POTATO", "BEET", "RADISH"],
            "CRUCIFEROUS": ["BROCCOLI", "CAULIFLOWER", "CABBAGE"],
        },
        "GRAINS": {
            "WHEAT": ["FLOUR", "BREAD", "PASTA"],
            "RICE": ["WHITE RICE", "BROWN RICE", "WILD RICE"],
            "ANCIENT": ["QUINOA", "BARLEY", "OATS"],
        },
    },
)
