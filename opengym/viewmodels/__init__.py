from opengym.viewmodels.place_list import PlaceListViewModel

__all__ = ["PlaceListViewModel"]
