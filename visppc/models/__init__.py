from .conjugate import (PredictiveModel,
                        NormalModel,
                        PoissonModel,
                        BernoulliModel,
                        LogisticModel)
