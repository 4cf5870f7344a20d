from rest_framework import serializers
from .models import LookupHeader, Lookup


class LookupHeaderSerializer(serializers.ModelSerializer):
    class Meta:
        model = LookupHeader
        fields = ['id', 'lookup_type', 'description', 'is_active']


class LookupValueSerializer(serializers.ModelSerializer):
    lookup_type = serializers.CharField(source='header.lookup_type', read_only=True)

    class Meta:
        model = Lookup
        fields = ['id', 'header', 'lookup_type', 'value', 'display_order', 'is_active']

    def validate_value(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Value cannot be blank")
        return value


# Read-only serializers for cached LookupHeaderRecord / LookupEntry objects

class CachedHeaderSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    lookup_type = serializers.CharField()
    description = serializers.CharField()


class CachedEntrySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    header_id = serializers.IntegerField()
    lookup_type = serializers.CharField()
    value = serializers.CharField()
    display_order = serializers.IntegerField()
