from dishka import Provider as DishkaProvider

from smog.util.di.scope import Scope


class Provider(DishkaProvider):
    """Base for all smog DI providers. Factories default to application lifetime."""

    scope = Scope.APP
