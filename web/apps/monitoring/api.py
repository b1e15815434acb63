from django.http import JsonResponse

SERVICE_NAME = "order-service"
VERSION = "1.0.0"


def health_view(_request):
    return JsonResponse({"status": "healthy", "service": SERVICE_NAME}, status=200)


def service_info_view(_request):
    return JsonResponse(
        {
            "service": SERVICE_NAME,
            "status": "running",
            "version": VERSION,
            "endpoints": {
                "health": "/health",
                "getAllOrders": "GET /orders",
                "getOrderById": "GET /orders/:id",
                "createOrder": "POST /orders",
            },
        },
        status=200,
    )
