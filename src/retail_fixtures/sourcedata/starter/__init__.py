"""
Starter profile seed texts.

A small chain: a handful of grocery and household categories, three
countries, and a companies source with a brands group followed by a
franchises group. All names are synthetic.
"""

CATEGORIES = """\
Beverages
Cola
Sparkling Water
Orange Juice
Cold Brew Coffee

Snacks
Potato Chips
Pretzels
Trail Mix

Dairy
Whole Milk
Greek Yogurt
Cheddar Cheese

Household
Dish Soap
Paper Towels
Laundry Detergent
"""

COUNTRIES = """\
Northland
Frostford
Pinehaven
Ashby

Westmarch
Harborview
Dunmore

Southreach
Solvale
Marisport
Cedar Point
"""

COMPANIES = """\
Brands
Acme
Globex
Initech
Umbrella Foods
Stark Goods

Franchises
QuickMart
ValueBarn
CornerGrocer
"""

__all__ = ["CATEGORIES", "COUNTRIES", "COMPANIES"]
