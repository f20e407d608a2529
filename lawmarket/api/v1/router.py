# 📄 File: lawmarket/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# The switchboard for version 1 of the API: sends user, admin, client, lawyer and catalog
# requests to the right part of the app.
# 🧪 Purpose (Technical Summary):
# Aggregates every module router under its v1 prefix and tag.
# 🔗 Dependencies:
# FastAPI APIRouter, module routers
# 🔄 Connected Modules / Calls From:
# lawmarket.main

from fastapi import APIRouter

from lawmarket.modules.accounts.presentation.api.v1.admin import admin_router
from lawmarket.modules.accounts.presentation.api.v1.users import users_router
from lawmarket.modules.clients.presentation.api.v1.clients import clients_router
from lawmarket.modules.clients.presentation.api.v1.onboarding import onboarding_router
from lawmarket.modules.lawyers.presentation.api.v1.lawyers import lawyers_router
from lawmarket.modules.specializations.presentation.api.v1.specializations import specializations_router

api_v1_router = APIRouter()

api_v1_router.include_router(users_router, prefix="/user", tags=["User"])
api_v1_router.include_router(admin_router, prefix="/admin", tags=["Admin"])
api_v1_router.include_router(onboarding_router, prefix="/onboarding", tags=["Onboarding"])
api_v1_router.include_router(clients_router, prefix="/clients", tags=["Clients"])
api_v1_router.include_router(lawyers_router, prefix="/lawyers", tags=["Lawyers"])
api_v1_router.include_router(specializations_router, prefix="/specializations", tags=["Specializations"])
