from sqlalchemy import Column, Integer, String, ForeignKey, Numeric, Text
from sqlalchemy.orm import relationship

from .base import BaseModel

class ShippingMethod(BaseModel):
    """Master data untuk metode pengiriman"""
    __tablename__ = 'shipping_methods'

    name = Column(String(255), unique=True, nullable=False, index=True)
    description = Column(Text)

    # Cost calculation
    base_cost = Column(Numeric(10, 2), nullable=False)
    cost_per_kg = Column(Numeric(10, 2), nullable=False, default=0)
    estimated_days = Column(Integer, nullable=False, default=3)

    # Back-reference saja, tanpa cascade: order yang ada memblokir delete
    orders = relationship('Order', back_populates='shipping_method', passive_deletes='all')

    def __repr__(self):
        return f'<ShippingMethod {self.id}: {self.name}>'

class ShippingZone(BaseModel):
    """Master data untuk zona tujuan pengiriman"""
    __tablename__ = 'shipping_zones'

    zone_name = Column(String(255), unique=True, nullable=False, index=True)
    additional_fee = Column(Numeric(10, 2), nullable=False)

    def __repr__(self):
        return f'<ShippingZone {self.id}: {self.zone_name}>'

class Order(BaseModel):
    """Order hasil kalkulasi ongkir, sekaligus penanda metode sedang dipakai"""
    __tablename__ = 'orders'

    shipping_method_id = Column(Integer, ForeignKey('shipping_methods.id'), nullable=False, index=True)
    total_price = Column(Numeric(20, 4), nullable=False)

    shipping_method = relationship('ShippingMethod', back_populates='orders')

    def __repr__(self):
        return f'<Order {self.id}: method={self.shipping_method_id} total={self.total_price}>'
