from rest_framework import serializers


class StaticRootStatusSerializer(serializers.Serializer):
    static_url = serializers.CharField()
    static_root = serializers.CharField(source='path')
    exists = serializers.BooleanField()
    writable = serializers.BooleanField()
    file_count = serializers.IntegerField()
