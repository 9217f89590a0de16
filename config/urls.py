"""
URL configuration for the Task Manager API.
"""
from django.urls import path
from ninja import NinjaAPI
from ninja.errors import ValidationError

api = NinjaAPI(
    title="Task Management API",
    version="1.0.0",
    description="API documentation for the Task Management application",
    docs_url="/docs",
)


@api.exception_handler(ValidationError)
def validation_error(request, exc: ValidationError):
    # Shape errors are client errors: 400 with the structured field list
    return api.create_response(request, {"detail": exc.errors}, status=400)


from apps.users.api import router as users_router, auth_router
from apps.tasks.api import router as tasks_router

api.add_router("/users", users_router)
api.add_router("/auth", auth_router)
api.add_router("/tasks", tasks_router)

urlpatterns = [
    path('api/', api.urls),
]
