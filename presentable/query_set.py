"""
Module containing Django query set and manager classes for presentable
models.

To present the results of queries of a model class in bulk, give the
class a `PresentableManager`:

    class User(Presentable, Model):

        objects = PresentableManager()

    users = User.objects.filter(is_active=True).present(UserPresenter)
"""


from django.db.models import Manager, QuerySet

from presentable.collection_ops import PresentableCollection
import presentable.collection_ops as collection_ops


class PresentableQuerySet(QuerySet):


    def present(self, presenter=None):

        """
        Presents the results of this query set.

        This evaluates the query set. The results are presented as by
        `collection_ops.present`, and are returned in a new
        `PresentableCollection`. A query set cannot be transformed in
        place, but the returned collection can.
        """

        return collection_ops.present(self, presenter)


    def to_collection(self):

        """Evaluates this query set into a `PresentableCollection`."""

        return PresentableCollection(self)


class PresentableManager(Manager.from_queryset(PresentableQuerySet)):
    pass
