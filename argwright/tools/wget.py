"""
wget wrapper.

Builds `wget` invocations; never runs them.

Options (in emission order)
- quiet, verbose, no_verbose                bool      -q -v -nv
- continue_download                         bool      -c
- timestamping, no_clobber, spider          bool      -N -nc --spider
- no_check_certificate                      bool      --no-check-certificate
- inet4_only, inet6_only                    bool      -4 -6
- timeout, wait, tries                      n >= 0    --timeout=<n> --wait=<n> --tries=<n>
- output_document, directory_prefix         str       -O <file> -P <dir>
- input_file, user_agent                    str       -i <file> -U <agent>
- header                                    str|list  --header=<h> ...
- method                                    str       --method=<m>
- post_data, post_file, body_data, body_file  str     --post-data=<s> ...
- recursive                                 bool      -r
- level                                     n >= 0    -l <n>
- no_parent, mirror, page_requisites, convert_links, adjust_extension
                                            bool      -np -m -p -k -E
- extra                                     list      appended verbatim after the modeled options
"""
from ..builder import builder
from .base import Tool


class Wget(Tool):
    bin = "wget"
    __options__ = (
        "quiet",
        "verbose",
        "no_verbose",
        "continue_download",
        "timestamping",
        "no_clobber",
        "spider",
        "no_check_certificate",
        "inet4_only",
        "inet6_only",
        "timeout",
        "wait",
        "tries",
        "output_document",
        "directory_prefix",
        "input_file",
        "user_agent",
        "header",
        "method",
        "post_data",
        "post_file",
        "body_data",
        "body_file",
        "recursive",
        "level",
        "no_parent",
        "mirror",
        "page_requisites",
        "convert_links",
        "adjust_extension",
    )

    def _apply(self, b, /):
        b.flag("quiet", "-q") \
            .flag("verbose", "-v") \
            .flag("no_verbose", "-nv") \
            .flag("continue_download", "-c") \
            .flag("timestamping", "-N") \
            .flag("no_clobber", "-nc") \
            .flag("spider", "--spider") \
            .flag("no_check_certificate", "--no-check-certificate") \
            .flag("inet4_only", "-4") \
            .flag("inet6_only", "-6") \
            .value_number("timeout", "--timeout", non_negative=True, mode="equals") \
            .value_number("wait", "--wait", non_negative=True, mode="equals") \
            .value_number("tries", "--tries", non_negative=True, mode="equals") \
            .value_string("output_document", "-O") \
            .value_string("directory_prefix", "-P") \
            .value_string("input_file", "-i") \
            .value_string("user_agent", "-U") \
            .repeatable("header", "--header", mode="equals") \
            .value_token("method", "--method", mode="equals") \
            .value_string("post_data", "--post-data", mode="equals") \
            .value_string("post_file", "--post-file", mode="equals") \
            .value_string("body_data", "--body-data", mode="equals") \
            .value_string("body_file", "--body-file", mode="equals") \
            .flag("recursive", "-r") \
            .value_number("level", "-l", non_negative=True) \
            .flag("no_parent", "-np") \
            .flag("mirror", "-m") \
            .flag("page_requisites", "-p") \
            .flag("convert_links", "-k") \
            .flag("adjust_extension", "-E") \
            .extra()

    def fetch(self, urls=None, /, **options):
        """
        Builds: `wget <opts...> [urls...]`

        urls may be omitted when input_file supplies them.
        """
        self._check(options)
        args = self._start()
        with builder(args, options) as b:
            self._apply(b)
            if urls is not None:
                b.operands(urls, "url", guard=True)
        return self._finish(args)

    def download(self, url, out=None, /, **options):
        """
        Download one URL, optionally to a given file (-O).
        """
        if out is not None:
            options = options | {"output_document": out}
        return self.fetch(url, **options)

    def mirror_site(self, url, dir=None, /, **options):
        """
        Mirror a site (-m), optionally under a directory prefix (-P).
        """
        options = options | {"mirror": True}
        if dir is not None:
            options["directory_prefix"] = dir
        return self.fetch(url, **options)


__all__ = ("Wget",)
