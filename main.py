#!/usr/bin/python3
# -*- Mode: Python; tab-width: 4; indent-tabs-mode: t; c-basic-offset: 4 -*- #
import argparse
import logging
import utils
import bench
import plot

from lssvm.persistence import save_model

parser = argparse.ArgumentParser(description="Least Squares SVM benchmark against scikit-learn", formatter_class=argparse.ArgumentDefaultsHelpFormatter)
parser.add_argument("-f", "--file", help="input file", required=True)
parser.add_argument("-t", "--type", help="algorithm type", choices=["r", "regression", "c", "classification"], default="c")
parser.add_argument("-F", "--to-find", help="dependant var to find", required=True)
parser.add_argument("-a", "--algorithm", help="algorithm to train and use", choices=sorted(utils.algos_map), default="LSSVM")
parser.add_argument("-p", "--params", help="YAML hyperparameter file", default="params.yaml")
parser.add_argument("-s", "--show", help="extra output", nargs="*", choices=["hyperparams", "confusion", "plots", "all"], default=[])
parser.add_argument("--save", help="write the fitted scratch model to this YAML file", default=None)
parser.add_argument("-v", "--verbose", help="debug logging", action="store_true")


def main(args):
	if args.verbose:
		logging.getLogger().setLevel(logging.DEBUG)
	typ = args.type[0]

	ModelClass = utils.get_class(args.algorithm, typ)
	model = ModelClass()
	params = utils.read_params(args.params)
	utils.apply_params(model, args.algorithm, typ, params, args.show)

	# Read and prepare data
	df = utils.read_file_wtype(args.file, typ)
	X, y, feature_names = utils.features_and_target(df, args.to_find, typ)
	logging.getLogger(__name__).debug(f"{X.shape[0]} samples, features: {feature_names}")

	X_train, X_test, y_train, y_test = utils.split(X, y)
	X_train, X_test = utils.standardize(X_train, X_test)

	# scikit-learn references with the same kernel and regularization
	refs = {f"{args.algorithm}_scikit": utils.algos_sci_map[args.algorithm][typ]}
	if typ == "r":
		refs["KernelRidge_scikit"] = utils.algos_sci_map["KernelRidge"]["r"]
	sci_models = {}
	for name, sk_cls in refs.items():
		sk = sk_cls()
		sk.set_params(**utils.sklearn_params(model, sk_cls))
		utils.apply_params(sk, args.algorithm, typ, params, args.show, is_sci=True)
		sci_models[name] = sk

	labels = [args.algorithm] + list(sci_models)
	if typ == "c":
		results = [bench.benchmark_classification(m, X_train, y_train, X_test, y_test)
				   for m in [model, *sci_models.values()]]
		plot.print_classification_report(results, labels)
		if utils.in_args(args.show, "confusion"):
			for res, lab in zip(results, labels):
				plot.print_confusion(res, lab)
		if utils.in_args(args.show, "plots") and "roc" in results[0]:
			plot.plot_roc(results, labels)
			plot.plot_pr(results, labels)
	else:
		results = [bench.benchmark_regression(m, X_train, y_train, X_test, y_test)
				   for m in [model, *sci_models.values()]]
		plot.print_regression_report(results, labels)
		if utils.in_args(args.show, "plots"):
			plot.plot_regression_parity(y_test, results, labels)

	if utils.in_args(args.show, "plots"):
		fitted = model.estimators_[0] if typ == "c" else model.model_
		plot.plot_dual_coefficients(fitted.alpha_, title=f"{args.algorithm} - |α|")

	if args.save:
		save_model(model, args.save)
		print(f"\nModel saved to {args.save}")

if __name__ == "__main__":
	main(parser.parse_args())
