from .simulate_data import (simulate_mixture_data,
                            simulate_bounded_data,
                            simulate_discrete_data,
                            simulate_count_data,
                            simulate_binary_data,
                            make_datasets)
