"""Application use cases."""

from talardnad.application.use_cases.create_market import (
    CreateMarket,
    CreateMarketCommand,
)
from talardnad.application.use_cases.create_payment import (
    CreatePayment,
    CreatePaymentCommand,
    GetPayment,
)
from talardnad.application.use_cases.create_provider import (
    CreateProvider,
    CreateProviderCommand,
    GetProvider,
)
from talardnad.application.use_cases.get_market import (
    GetMarket,
    GetMarketCommand,
    ListProviderMarkets,
)
from talardnad.application.use_cases.login_user import LoginUser
from talardnad.application.use_cases.register_user import (
    RegisterUser,
    RegisterUserCommand,
)
from talardnad.application.use_cases.user_profile import (
    DeleteUser,
    DeleteUserCommand,
    GetUserProfile,
    GetUserProfileCommand,
    UpdateUserProfile,
    UpdateUserProfileCommand,
)

__all__ = [
    "CreateMarket",
    "CreateMarketCommand",
    "GetMarket",
    "GetMarketCommand",
    "ListProviderMarkets",
    "CreateProvider",
    "CreateProviderCommand",
    "GetProvider",
    "RegisterUser",
    "RegisterUserCommand",
    "LoginUser",
    "GetUserProfile",
    "GetUserProfileCommand",
    "UpdateUserProfile",
    "UpdateUserProfileCommand",
    "DeleteUser",
    "DeleteUserCommand",
    "CreatePayment",
    "CreatePaymentCommand",
    "GetPayment",
]
