"""Built-in restaurant list used on first launch."""

from lunch.models.enums import Category

DEFAULT_RESTAURANTS: tuple[tuple[str, Category], ...] = (
    ("Arbys", Category.CHEAP),
    ("Bubba's", Category.NORMAL),
    ("Charlestons", Category.NORMAL),
    ("Firehouse", Category.NORMAL),
    ("Freddies", Category.NORMAL),
    ("Frosted Mug", Category.NORMAL),
    ("Hideaway", Category.NORMAL),
    ("Jersey Mike's", Category.NORMAL),
    ("Johnnies", Category.NORMAL),
    ("Mcalisters", Category.NORMAL),
    ("Mcneilies", Category.NORMAL),
    ("Olive Garden", Category.NORMAL),
    ("On The Border", Category.NORMAL),
    ("Qdoba", Category.NORMAL),
    ("Tamashii Ramen", Category.NORMAL),
    ("Teds", Category.NORMAL),
    ("The Mule", Category.NORMAL),
    ("Zios", Category.NORMAL),
)
