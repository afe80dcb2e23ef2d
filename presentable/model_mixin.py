"""
Module containing mixin class `Presentable`.

`Presentable` is a mixin for model classes, typically Django models:

    class User(Presentable, Model):

        default_presenter = 'myapp.presenters.UserPresenter'

        first_name = CharField(max_length=255)
        last_name = CharField(max_length=255)

    user.present()                      # presents with `UserPresenter`
    user.present(AdminUserPresenter)    # presents with another presenter
    user.to_dict()                      # {'id': ..., 'first_name': ...}
"""


import presentable.model_utils as model_utils
import presentable.presenter_factory as presenter_factory


class Presentable:


    default_presenter = None
    """
    The default presenter of this model class.

    The default presenter is used when a model is presented without
    specifying a presenter. It may be a `Presenter` subclass or the
    dotted import path of one. If it is `None`, a model can be presented
    only by specifying a presenter.
    """


    def present(self, presenter=None):

        """
        Creates a presenter for this model.

        See `presenter_factory.present` for the kinds of presenter
        designations that can be specified with `presenter`.
        """

        return presenter_factory.present(self, presenter)


    def to_dict(self):
        return model_utils.get_field_values(self)


    def to_json(self, **options):
        return model_utils.to_json(self, **options)
