import sys

from figura_feature import FeatureConfig, run


TEST_MODE = False


if __name__ == "__main__":
    config = FeatureConfig(test_mode=TEST_MODE)
    sys.exit(run(config))
