# security/api/routers.py
from django.urls import path

from security.api.views.auth import (
    ChangePasswordView,
    MeView,
    ProfileView,
    RefreshView,
    RegisterView,
    SignInView,
)
from security.api.views.users import (
    ApproveUserView,
    ChangeUserRoleView,
    PendingUserListView,
    StorageAccessView,
    ToggleUserStatusView,
    UserListView,
)

urlpatterns = [
    # --- Auth ---
    path("auth/register", RegisterView.as_view(), name="auth-register"),
    path("auth/sign-in", SignInView.as_view(), name="auth-sign-in"),
    path("auth/refresh", RefreshView.as_view(), name="auth-refresh"),
    path("auth/me", MeView.as_view(), name="auth-me"),
    path("auth/profile", ProfileView.as_view(), name="auth-profile"),
    path("auth/password", ChangePasswordView.as_view(), name="auth-password"),
    # --- Admin · Usuarios ---
    path("users/", UserListView.as_view(), name="users-list"),
    path("users/pending/", PendingUserListView.as_view(), name="users-pending"),
    path("users/<int:user_id>/approve/", ApproveUserView.as_view(), name="users-approve"),
    path("users/<int:user_id>/role/", ChangeUserRoleView.as_view(), name="users-role"),
    path("users/<int:user_id>/toggle-status/", ToggleUserStatusView.as_view(),
         name="users-toggle-status"),
    path("users/<int:user_id>/s3-access/", StorageAccessView.as_view(), name="users-s3-access"),
]
