"""Chat API view.

POST /api/chat/ -> {"reply": str, "order_draft": {...} | null}
The draft is only a suggestion for the order form; nothing is stored here.
"""

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle
from rest_framework.views import APIView

from chatbot.assistant import ChatAssistant, ChatMessage
from .serializers import ChatRequestSerializer


class ChatRateThrottle(AnonRateThrottle):
    rate = "30/min"


class ChatAPIView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]
    throttle_classes = [ChatRateThrottle]

    def post(self, request, *args, **kwargs):
        serializer = ChatRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        history = [ChatMessage(**m) for m in serializer.validated_data["history"]]
        result = ChatAssistant().reply(history, serializer.validated_data["message"])
        return Response(
            {
                "reply": result.text,
                "order_draft": result.order_draft.as_dict() if result.order_draft else None,
            },
            status=status.HTTP_200_OK,
        )
