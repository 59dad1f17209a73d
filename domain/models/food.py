"""
Food reference data.
"""

from sqlalchemy import Column, Float, Integer, Text

from domain.models.database import Base


class Food(Base):
    """Nutritional reference record, values per 100 g"""

    __tablename__ = "foods"

    food_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    description = Column(Text)
    category = Column(Text)
    kcal = Column(Float)
    protein = Column(Float)
    carbs = Column(Float)
    fats = Column(Float)
    image_url = Column(Text)
    viability_weight_loss = Column(Text)
    viability_muscle_gain = Column(Text)
    viability_maintenance = Column(Text)
