from wallet_ledger.domain.models import Favorite


class FavoriteRepository:
    def __init__(self) -> None:
        self._favorites: dict[str, Favorite] = {}
        self._by_payment_id: dict[str, Favorite] = {}

    def __len__(self) -> int:
        return len(self._favorites)

    def get(self, favorite_id: str) -> Favorite | None:
        return self._favorites.get(favorite_id)

    def get_by_payment_id(self, payment_id: str) -> Favorite | None:
        return self._by_payment_id.get(payment_id)

    def add(self, favorite: Favorite) -> None:
        if favorite.id in self._favorites:
            raise ValueError(f"Favorite {favorite.id} already stored")
        self._favorites[favorite.id] = favorite
        self._by_payment_id[favorite.payment_id] = favorite

    def get_all(self) -> list[Favorite]:
        return list(self._favorites.values())
