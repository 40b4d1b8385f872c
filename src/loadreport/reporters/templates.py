from __future__ import annotations

from string import Template

PLOT_TEMPLATE = Template(
    """<!doctype html>
<html>
<head>
  <meta charset="utf-8">
  <title>Load Report Plot</title>
</head>
<body>
  <div id="latencies" style="font-family: Courier; width: 100%; height: 600px"></div>
  <script>
$asset
  </script>
  <script>
  (function () {
    var points = [$series];
    var column = function (i) {
      return points.map(function (p) { return p[i]; });
    };
    var seconds = column(0);
    Plotly.newPlot("latencies", [
      {x: seconds, y: column(1), name: "ERR", mode: "markers", marker: {color: "#FA7878", size: 4}},
      {x: seconds, y: column(2), name: "OK", mode: "markers", marker: {color: "#8AE234", size: 4}}
    ], {
      title: {text: "Latency Plot"},
      xaxis: {title: {text: "Seconds elapsed"}},
      yaxis: {title: {text: "Latency (ms)"}, type: "log"},
      showlegend: true
    });
  })();
  </script>
</body>
</html>
"""
)

CHART_TEMPLATE = Template(
    """<!doctype html>
<html>
<head>
  <meta charset="utf-8">
  <title>Load Report Chart</title>
  <script src="https://code.jquery.com/jquery-2.1.3.min.js"></script>
  <script src="https://code.highcharts.com/highcharts.js"></script>
  <script src="https://code.highcharts.com/modules/exporting.js"></script>
</head>
<body>
  <div id="container" style="min-width: 310px; height: 400px; margin: 0 auto"></div>
  <script>
  $$(function () {
    $$("#container").highcharts({
      chart: {type: "spline"},
      title: {text: "Latency Chart"},
      subtitle: {text: "built with highcharts.com"},
      xAxis: {title: {text: "Seconds"}},
      yAxis: {title: {text: "Latency (ms)"}, min: 0},
      tooltip: {
        headerFormat: "<b>{series.name}</b><br>",
        pointFormat: "{point.x:.3f}s: {point.y:.2f} ms"
      },
      colors: ["green", "red"],
      series: [
        {name: "OK", data: [$series_ok]},
        {name: "ERROR", data: [$series_error]}
      ]
    });
  });
  </script>
</body>
</html>
"""
)
