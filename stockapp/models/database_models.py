from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import declarative_base


Base = declarative_base()


class Product(Base):
    """Stock item tracked by barcode"""

    __tablename__ = "product"
    # keep ids monotonic on sqlite, deleted ids are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=True)
    barcode = Column(String(128), nullable=False, unique=True, index=True)
    quantity = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<Product id={self.id} barcode={self.barcode!r} quantity={self.quantity}>"
