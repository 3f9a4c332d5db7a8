from rest_framework import serializers


class ChatMessageSerializer(serializers.Serializer):
    sender = serializers.ChoiceField(choices=("user", "bot"))
    text = serializers.CharField(allow_blank=True, trim_whitespace=False)


class ChatRequestSerializer(serializers.Serializer):
    history = ChatMessageSerializer(many=True, required=False, default=list)
    message = serializers.CharField(max_length=4000)
