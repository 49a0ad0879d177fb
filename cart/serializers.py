from rest_framework import serializers


class CartItemSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    subtotal = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)


class CartSerializer(serializers.Serializer):
    """Shape of every cart API response: ``{items, count, total}``."""

    def to_representation(self, cart):
        return {
            "items": CartItemSerializer(cart.content(), many=True).data,
            "count": len(cart),
            "total": str(cart.total()),
        }
